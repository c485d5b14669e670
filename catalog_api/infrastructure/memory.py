"""In-memory catalog store and read repositories.

Used as the default storage backend and by the test suite. The store
is filled once (from the demo generator or by tests) and only read
afterwards.
"""

from collections.abc import Callable, Iterable
from typing import Any

import structlog

from catalog_api.application.pagination import DataProvider, Pagination, Sort
from catalog_api.application.repositories import parse_id
from catalog_api.domain.entities import Category, Product, Tag

logger = structlog.get_logger()


# ============================================================================
# Store
# ============================================================================


class CatalogStore:
    """Holds catalog entities keyed by ID."""

    def __init__(self) -> None:
        self.categories: dict[int, Category] = {}
        self.tags: dict[int, Tag] = {}
        self.products: dict[int, Product] = {}

    def add_categories(self, categories: Iterable[Category]) -> None:
        """Add or replace categories."""
        for category in categories:
            self.categories[category.id] = category

    def add_tags(self, tags: Iterable[Tag]) -> None:
        """Add or replace tags."""
        for tag in tags:
            self.tags[tag.id] = tag

    def add_products(self, products: Iterable[Product]) -> None:
        """Add or replace products.

        Categories and tags referenced by the products are registered
        too, so lookups by id resolve.
        """
        for product in products:
            self.add_categories(product.all_categories)
            self.add_tags(product.tags)
            self.products[product.id] = product

    def clear(self) -> None:
        """Remove everything."""
        self.categories.clear()
        self.tags.clear()
        self.products.clear()


# Global store instance
_catalog_store: CatalogStore | None = None


def get_catalog_store() -> CatalogStore:
    """Get catalog store singleton.

    When demo seeding is enabled the store is filled from the
    generator on first access.
    """
    global _catalog_store
    if _catalog_store is None:
        from catalog_api.infrastructure.config import settings

        _catalog_store = CatalogStore()
        if settings.seed_demo_catalog:
            seed_store(_catalog_store)
    return _catalog_store


def seed_store(store: CatalogStore) -> None:
    """Fill a store with the deterministic demo catalog."""
    from catalog_api.catalog.generator import CatalogGenerator, GeneratorConfig

    catalog = CatalogGenerator(GeneratorConfig.small()).generate()
    store.add_categories(catalog.categories)
    store.add_tags(catalog.tags)
    store.add_products(catalog.products)
    logger.info(
        "Seeded in-memory catalog",
        categories=len(store.categories),
        tags=len(store.tags),
        products=len(store.products),
    )


# ============================================================================
# Repositories
# ============================================================================


def _sort_key(field: str) -> Callable[[Product], Any]:
    keys: dict[str, Callable[[Product], Any]] = {
        "id": lambda p: p.id,
        "name": lambda p: p.name,
        "price": lambda p: p.price.new,
    }
    return keys.get(field, keys["id"])


def _paginate(
    products: Iterable[Product],
    pagination: Pagination,
    sort: Sort,
) -> DataProvider[Product]:
    # Stable sort keeps ties in ascending id order in both directions
    ordered = sorted(products, key=lambda p: p.id)
    ordered.sort(key=_sort_key(sort.field), reverse=sort.descending)
    pagination.total_count = len(ordered)
    start = pagination.offset
    return DataProvider(
        models=ordered[start : start + pagination.limit],
        pagination=pagination,
        sort=sort,
    )


class MemoryProductReadRepository:
    """In-memory product read repository."""

    def __init__(self, store: CatalogStore | None = None) -> None:
        self.store = store or get_catalog_store()

    async def find(self, product_id: Any) -> Product | None:
        """Get product by ID."""
        key = parse_id(product_id)
        return self.store.products.get(key) if key is not None else None

    async def get_all(self, pagination: Pagination, sort: Sort) -> DataProvider[Product]:
        """List all products."""
        return _paginate(self.store.products.values(), pagination, sort)

    async def get_all_by_category(
        self, category: Category, pagination: Pagination, sort: Sort
    ) -> DataProvider[Product]:
        """List products whose primary or additional category matches."""
        matching = (p for p in self.store.products.values() if p.in_category(category.id))
        return _paginate(matching, pagination, sort)

    async def get_all_by_tag(
        self, tag: Tag, pagination: Pagination, sort: Sort
    ) -> DataProvider[Product]:
        """List products carrying a tag."""
        matching = (p for p in self.store.products.values() if p.has_tag(tag.id))
        return _paginate(matching, pagination, sort)


class MemoryCategoryReadRepository:
    """In-memory category read repository."""

    def __init__(self, store: CatalogStore | None = None) -> None:
        self.store = store or get_catalog_store()

    async def find(self, category_id: Any) -> Category | None:
        """Get category by ID."""
        key = parse_id(category_id)
        return self.store.categories.get(key) if key is not None else None


class MemoryTagReadRepository:
    """In-memory tag read repository."""

    def __init__(self, store: CatalogStore | None = None) -> None:
        self.store = store or get_catalog_store()

    async def find(self, tag_id: Any) -> Tag | None:
        """Get tag by ID."""
        key = parse_id(tag_id)
        return self.store.tags.get(key) if key is not None else None
