"""
Route definitions for the catalogue API.

Endpoints under /api:
- GET    /products                : list products (filter/search/sort/paginate)
- GET    /products/{product_id}   : get one product
- POST   /products                : create a product
- PUT    /products/{product_id}   : partially update a product
- DELETE /products/{product_id}   : delete a product
- GET    /categories              : distinct product categories
- GET    /brands                  : distinct product brands
- GET    /blog                    : list blog posts (filter/search/paginate)
- GET    /blog/categories         : distinct blog categories
- GET    /blog/{post_id}          : get one blog post

Listing parameters are declared as plain strings and parsed by
``ListQuery.from_params`` so that malformed numbers degrade to the
defaults instead of producing a 422.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query, Request

from ..config import BLOG_PAGE_SIZE, PRODUCTS_PAGE_SIZE
from ..query import SORT_OPTIONS, ListQuery, run_query
from .schemas import (
    BlogPage,
    BlogPost,
    Message,
    Product,
    ProductCreate,
    ProductPage,
    ProductUpdate,
)
from .store import CatalogStore

PRODUCT_SEARCH_FIELDS = ("name", "description")
BLOG_SEARCH_FIELDS = ("title", "excerpt")

router = APIRouter(prefix="/api", tags=["catalog"])


def get_store(request: Request) -> CatalogStore:
    """Return the store owned by the running application."""
    return request.app.state.store


@router.get("/products", response_model=ProductPage)
def list_products(
    page: Optional[str] = Query(default=None, description="Page number (1-indexed)"),
    limit: Optional[str] = Query(default=None, description="Page size"),
    sort: Optional[str] = Query(default=None, description=", ".join(SORT_OPTIONS)),
    category: Optional[str] = Query(default=None, description="Filter by category"),
    brand: Optional[str] = Query(default=None, description="Filter by brand"),
    min_price: Optional[str] = Query(default=None, alias="minPrice"),
    max_price: Optional[str] = Query(default=None, alias="maxPrice"),
    search: Optional[str] = Query(default=None, description="Text search (name/description)"),
    store: CatalogStore = Depends(get_store),
) -> ProductPage:
    query = ListQuery.from_params(
        PRODUCTS_PAGE_SIZE,
        page=page,
        limit=limit,
        category=category,
        brand=brand,
        min_price=min_price,
        max_price=max_price,
        search=search,
        sort=sort,
    )
    result = run_query(store.list_products(), query, PRODUCT_SEARCH_FIELDS)
    return ProductPage(
        products=result.items,
        total_products=result.total_items,
        total_pages=result.total_pages,
        current_page=result.current_page,
        has_next_page=result.has_next_page,
        has_prev_page=result.has_prev_page,
    )


@router.get("/products/{product_id}", response_model=Product)
def get_product(product_id: str, store: CatalogStore = Depends(get_store)) -> Product:
    return store.get_product(product_id)


@router.post("/products", response_model=Product, status_code=201)
def create_product(
    data: Optional[ProductCreate] = Body(default=None),
    store: CatalogStore = Depends(get_store),
) -> Product:
    """Create a product.

    A request without a body is treated like an empty JSON object, so it
    fails the required-field check with the usual 400 message.
    """
    return store.create_product(data if data is not None else ProductCreate())


@router.put("/products/{product_id}", response_model=Product)
def update_product(
    product_id: str, data: ProductUpdate, store: CatalogStore = Depends(get_store)
) -> Product:
    return store.update_product(product_id, data)


@router.delete("/products/{product_id}", response_model=Message)
def delete_product(product_id: str, store: CatalogStore = Depends(get_store)) -> Message:
    store.delete_product(product_id)
    return Message(message="Product deleted successfully")


@router.get("/categories", response_model=List[str])
def list_categories(store: CatalogStore = Depends(get_store)) -> List[str]:
    return store.product_categories()


@router.get("/brands", response_model=List[str])
def list_brands(store: CatalogStore = Depends(get_store)) -> List[str]:
    return store.product_brands()


@router.get("/blog", response_model=BlogPage)
def list_blog_posts(
    page: Optional[str] = Query(default=None),
    limit: Optional[str] = Query(default=None),
    category: Optional[str] = Query(default=None),
    search: Optional[str] = Query(default=None, description="Text search (title/excerpt)"),
    store: CatalogStore = Depends(get_store),
) -> BlogPage:
    query = ListQuery.from_params(
        BLOG_PAGE_SIZE, page=page, limit=limit, category=category, search=search
    )
    result = run_query(store.list_blog_posts(), query, BLOG_SEARCH_FIELDS)
    return BlogPage(
        posts=result.items,
        total_posts=result.total_items,
        total_pages=result.total_pages,
        current_page=result.current_page,
    )


# Must be declared before /blog/{post_id}
@router.get("/blog/categories", response_model=List[str])
def list_blog_categories(store: CatalogStore = Depends(get_store)) -> List[str]:
    return store.blog_categories()


@router.get("/blog/{post_id}", response_model=BlogPost)
def get_blog_post(post_id: str, store: CatalogStore = Depends(get_store)) -> BlogPost:
    return store.get_blog_post(post_id)
