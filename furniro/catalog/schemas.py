"""
Pydantic schema definitions for the catalog module.

Attributes are snake_case in Python and camelCase on the wire
(``originalPrice``, ``inStock``, ``totalProducts``...) so the JSON
contract matches what the storefront already consumes. Both spellings
are accepted on input.

``ProductCreate`` and ``ProductUpdate`` declare every field optional:
presence of the required create fields is checked by the store so a
missing field produces the catalogue's own 400 message instead of a
schema error, and an update only touches the fields that were sent.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..query import parse_int


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Product(CamelModel):
    """A single product as listed in the shop.

    ``original_price`` is only set when the product is discounted and
    ``discount`` is the percentage taken off it. ``sku`` is a display
    code and is not guaranteed to be unique.
    """

    id: str
    name: str
    description: str
    price: int
    original_price: Optional[int] = None
    discount: int = 0
    category: str
    brand: str
    image: str = ""
    rating: float = 0.0
    reviews: int = 0
    badge: Optional[str] = None
    sku: str = ""
    tags: List[str] = Field(default_factory=list)
    in_stock: bool = True


class BlogPost(CamelModel):
    """A blog article. ``date`` is kept as the ISO string it was seeded with."""

    id: str
    title: str
    excerpt: str
    content: str
    author: str
    date: str
    category: str
    image: str = ""
    tags: List[str] = Field(default_factory=list)


class ProductCreate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[int] = None
    category: Optional[str] = None
    brand: Optional[str] = None
    image: Optional[str] = None
    tags: Optional[List[str]] = None

    @field_validator("price", mode="before")
    @classmethod
    def coerce_price(cls, value):
        # "2500abc" and 2500.5 both become 2500; unparseable values
        # count as missing.
        return parse_int(value)


class ProductUpdate(ProductCreate):
    """Partial product update; fields left out (or null) are not changed."""


class ProductPage(CamelModel):
    """Wrapper returned by ``GET /api/products``."""

    products: List[Product]
    total_products: int
    total_pages: int
    current_page: int
    has_next_page: bool
    has_prev_page: bool


class BlogPage(CamelModel):
    """Wrapper returned by ``GET /api/blog``."""

    posts: List[BlogPost]
    total_posts: int
    total_pages: int
    current_page: int


class Message(BaseModel):
    message: str
