# furniro/config.py
"""Centralized configuration for the catalog API.

Values are read from the environment once at import time. A ``.env``
file in the working directory is honoured so local runs can override
the port without exporting variables.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3001"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Pagination defaults per collection
PRODUCTS_PAGE_SIZE = 16
BLOG_PAGE_SIZE = 6

DEFAULT_PRODUCT_IMAGE = "/images/default.jpg"


@dataclass
class Settings:
    """Snapshot of the settings used to build an application instance."""

    host: str = HOST
    port: int = PORT
    log_level: str = LOG_LEVEL
    cors_origins: List[str] = field(default_factory=lambda: list(CORS_ORIGINS))
    seed: bool = True
