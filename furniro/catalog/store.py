"""
In-memory data store for the catalogue API.

A ``CatalogStore`` owns the two collections (products and blog posts).
One instance is created when the application starts and handed to the
routes through a FastAPI dependency; tests build their own instances.

FastAPI runs synchronous endpoints in a thread pool, so every read and
write goes through a single re-entrant lock. Readers get a snapshot
copy of the list, never the live one.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Iterable, List, Optional

from ..config import DEFAULT_PRODUCT_IMAGE
from ..errors import NotFound, ValidationError
from .schemas import BlogPost, Product, ProductCreate, ProductUpdate
from .seed import load_blog_posts, load_products

logger = logging.getLogger(__name__)

REQUIRED_PRODUCT_FIELDS = ("name", "description", "price", "category", "brand")

# Text fields where an empty string means "leave unchanged" on update
_TEXT_UPDATE_FIELDS = ("name", "description", "category", "brand", "image")


def _distinct(values: Iterable[str]) -> List[str]:
    """Return distinct values in first-occurrence order."""
    return list(dict.fromkeys(values))


def _new_product_id() -> str:
    return str(uuid.uuid4())


class CatalogStore:
    def __init__(
        self,
        products: Optional[List[Product]] = None,
        blog_posts: Optional[List[BlogPost]] = None,
    ) -> None:
        self._products: List[Product] = list(products or [])
        self._blog_posts: List[BlogPost] = list(blog_posts or [])
        self._lock = threading.RLock()

    @classmethod
    def with_sample_data(cls) -> "CatalogStore":
        return cls(products=load_products(), blog_posts=load_blog_posts())

    def close(self) -> None:
        with self._lock:
            self._products.clear()
            self._blog_posts.clear()

    # ------------------------------------------------------------------
    # Products

    def list_products(self) -> List[Product]:
        with self._lock:
            return list(self._products)

    def _product_index(self, product_id: str) -> int:
        for i, p in enumerate(self._products):
            if p.id == product_id:
                return i
        logger.warning("product %s not found", product_id)
        raise NotFound("Product not found")

    def get_product(self, product_id: str) -> Product:
        with self._lock:
            return self._products[self._product_index(product_id)]

    def create_product(self, data: ProductCreate) -> Product:
        """Append a new product built from ``data``.

        Every field in ``REQUIRED_PRODUCT_FIELDS`` must be truthy; a
        price of 0 therefore counts as missing.

        Parameters
        ----------
        data : ProductCreate
            Client payload. ``image`` and ``tags`` are optional.

        Returns
        -------
        Product
            The stored record with a fresh id, a display ``sku`` and
            zero/default rating, reviews, discount and stock values.

        Raises
        ------
        ValidationError
            When a required field is missing or falsy.
        """
        if not all(getattr(data, f) for f in REQUIRED_PRODUCT_FIELDS):
            raise ValidationError("Missing required fields")

        with self._lock:
            existing = {p.id for p in self._products}
            product_id = _new_product_id()
            while product_id in existing:
                product_id = _new_product_id()

            product = Product(
                id=product_id,
                name=data.name,
                description=data.description,
                price=data.price,
                original_price=None,
                discount=0,
                category=data.category,
                brand=data.brand,
                image=data.image or DEFAULT_PRODUCT_IMAGE,
                rating=0,
                reviews=0,
                badge=None,
                sku=f"SS{len(self._products) + 1:03d}",
                tags=list(data.tags or []),
                in_stock=True,
            )
            self._products.append(product)
        logger.info("created product %s (%s)", product.id, product.name)
        return product

    def update_product(self, product_id: str, data: ProductUpdate) -> Product:
        """Merge the provided fields of ``data`` into a stored product.

        ``None`` leaves a field untouched, and so does an empty string
        for the text fields. ``price=0`` and ``tags=[]`` are applied.
        The identifier is never changed.

        Parameters
        ----------
        product_id : str
            Identifier of the product to update.
        data : ProductUpdate
            Partial payload.

        Returns
        -------
        Product
            The record as stored after the merge, at the same position.

        Raises
        ------
        NotFound
            When no product has ``product_id``.
        """
        changes = data.model_dump(exclude_none=True)
        for f in _TEXT_UPDATE_FIELDS:
            if changes.get(f) == "":
                del changes[f]

        with self._lock:
            idx = self._product_index(product_id)
            updated = self._products[idx].model_copy(update=changes)
            self._products[idx] = updated
        logger.info("updated product %s fields=%s", product_id, sorted(changes))
        return updated

    def delete_product(self, product_id: str) -> None:
        with self._lock:
            del self._products[self._product_index(product_id)]
        logger.info("deleted product %s", product_id)

    def product_categories(self) -> List[str]:
        with self._lock:
            return _distinct(p.category for p in self._products)

    def product_brands(self) -> List[str]:
        with self._lock:
            return _distinct(p.brand for p in self._products)

    # ------------------------------------------------------------------
    # Blog posts (read-only)

    def list_blog_posts(self) -> List[BlogPost]:
        with self._lock:
            return list(self._blog_posts)

    def get_blog_post(self, post_id: str) -> BlogPost:
        with self._lock:
            for post in self._blog_posts:
                if post.id == post_id:
                    return post
        logger.warning("blog post %s not found", post_id)
        raise NotFound("Blog post not found")

    def blog_categories(self) -> List[str]:
        with self._lock:
            return _distinct(p.category for p in self._blog_posts)
