"""Shared test fixtures for the catalog API test suite."""

import pytest
from fastapi.testclient import TestClient

from furniro.catalog import CatalogStore
from furniro.config import Settings
from furniro.main import create_app


@pytest.fixture
def settings():
    """Settings for a seeded app with permissive CORS."""
    return Settings(log_level="DEBUG", cors_origins=["*"], seed=True)


@pytest.fixture
def store():
    """A fresh store holding the sample products and blog posts."""
    return CatalogStore.with_sample_data()


@pytest.fixture
def products(store):
    return store.list_products()


@pytest.fixture
def client(settings):
    """Create a FastAPI test client; the lifespan builds a new store per test."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
