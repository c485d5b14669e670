"""Shared fixtures for catalog tests."""

import pytest
from fastapi.testclient import TestClient

import catalog_api.infrastructure.memory as memory_module
from catalog_api.catalog.generator import GeneratedCatalog
from catalog_api.domain.entities import Category, Photo, Product, Tag
from catalog_api.domain.value_objects import Price
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.memory import CatalogStore, get_catalog_store
from catalog_api.main import app

ELECTRONICS = Category(id=1, name="Electronics")
GIFTS = Category(id=7, name="Gifts")
SALE = Category(id=8, name="Sale")
EMPTY = Category(id=9, name="Empty")

NEW = Tag(id=1, name="new")
ECO = Tag(id=2, name="eco")
UNUSED = Tag(id=3, name="unused")


def build_products() -> list[Product]:
    """Three products covering photo/no photo, old price/no old price."""
    return [
        Product(
            id=42,
            code="P42",
            name="Noise Cancelling Headphones",
            description="Over-ear, wireless.",
            category=ELECTRONICS,
            categories=(GIFTS, SALE),
            tags=(NEW,),
            price=Price(new=1999),
        ),
        Product(
            id=43,
            code="P43",
            name="Bamboo Gift Box",
            description=None,
            category=GIFTS,
            tags=(NEW, ECO),
            price=Price(new=2999, old=3999),
            main_photo=Photo(id=5, file="front.jpg"),
        ),
        Product(
            id=44,
            code="P44",
            name="Clearance Cable",
            category=SALE,
            price=Price(new=500),
        ),
    ]


@pytest.fixture(autouse=True)
def reset_stores():
    """Reset global stores before each test."""
    memory_module._catalog_store = None
    yield
    memory_module._catalog_store = None


@pytest.fixture
def fixture_catalog() -> GeneratedCatalog:
    """Small hand-written catalog.

    Categories 1, 7, 8, 9 (9 has no products), tags 1, 2, 3 (3 unused),
    products 42, 43, 44.
    """
    return GeneratedCatalog(
        categories=[ELECTRONICS, GIFTS, SALE, EMPTY],
        tags=[NEW, ECO, UNUSED],
        products=build_products(),
    )


@pytest.fixture
def catalog_store(fixture_catalog: GeneratedCatalog) -> CatalogStore:
    """Global in-memory store filled with the fixture catalog."""
    store = get_catalog_store()
    store.add_categories(fixture_catalog.categories)
    store.add_tags(fixture_catalog.tags)
    store.add_products(fixture_catalog.products)
    return store


@pytest.fixture
def client() -> TestClient:
    """Create test client without authentication."""
    return TestClient(app)


@pytest.fixture
def auth_client(catalog_store: CatalogStore) -> TestClient:
    """Create test client with valid API key over the fixture catalog."""
    return TestClient(
        app,
        headers={"Authorization": f"Bearer {settings.catalog_api_key}"},
    )


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Get authentication headers."""
    return {"Authorization": f"Bearer {settings.catalog_api_key}"}
