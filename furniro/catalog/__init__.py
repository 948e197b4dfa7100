"""
Catalog package for the shop API.

This package contains the schemas, the in-memory store and the route
definitions that expose the product and blog collections over REST.
Listing endpoints delegate filtering, search, sorting and pagination
to ``furniro.query``.
"""

from .router import router as catalog_router  # noqa: F401
from .store import CatalogStore  # noqa: F401
