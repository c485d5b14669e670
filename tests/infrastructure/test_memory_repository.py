"""Tests for the in-memory catalog store and repositories."""

import pytest

import catalog_api.infrastructure.memory as memory_module
from catalog_api.application.pagination import Pagination, Sort
from catalog_api.catalog.generator import GeneratedCatalog
from catalog_api.domain.entities import Category, Product, Tag
from catalog_api.domain.value_objects import Price
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.memory import (
    CatalogStore,
    MemoryCategoryReadRepository,
    MemoryProductReadRepository,
    MemoryTagReadRepository,
    get_catalog_store,
)


@pytest.fixture
def store(fixture_catalog: GeneratedCatalog) -> CatalogStore:
    store = CatalogStore()
    store.add_categories(fixture_catalog.categories)
    store.add_tags(fixture_catalog.tags)
    store.add_products(fixture_catalog.products)
    return store


class TestCatalogStore:
    """Tests for CatalogStore."""

    def test_products_register_references(self) -> None:
        store = CatalogStore()
        store.add_products(
            [
                Product(
                    id=1,
                    code="A",
                    name="A",
                    category=Category(id=3, name="Three"),
                    categories=(Category(id=4, name="Four"),),
                    tags=(Tag(id=5, name="five"),),
                    price=Price(new=1),
                )
            ]
        )
        assert set(store.categories) == {3, 4}
        assert set(store.tags) == {5}

    def test_clear(self, store: CatalogStore) -> None:
        store.clear()
        assert not store.products
        assert not store.categories
        assert not store.tags

    def test_singleton(self) -> None:
        assert get_catalog_store() is get_catalog_store()

    def test_demo_seeding(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "seed_demo_catalog", True)
        memory_module._catalog_store = None

        store = get_catalog_store()
        assert len(store.products) == 40
        assert len(store.categories) == 8


class TestMemoryProductReadRepository:
    """Tests for MemoryProductReadRepository."""

    @pytest.mark.asyncio
    async def test_find(self, store: CatalogStore) -> None:
        repo = MemoryProductReadRepository(store)
        assert (await repo.find("43")).name == "Bamboo Gift Box"
        assert await repo.find("nope") is None
        assert await repo.find(1) is None

    @pytest.mark.asyncio
    async def test_get_all_sorted_and_paged(self, store: CatalogStore) -> None:
        repo = MemoryProductReadRepository(store)
        pagination = Pagination(page=2, page_size=2)

        provider = await repo.get_all(pagination, Sort.parse("price"))

        assert pagination.total_count == 3
        assert provider.keys == [43]

    @pytest.mark.asyncio
    async def test_name_sort_breaks_ties_by_id(self) -> None:
        store = CatalogStore()
        main = Category(id=1, name="Main")
        store.add_products(
            [
                Product(id=i, code=str(i), name="Same", category=main, price=Price(new=1))
                for i in (3, 1, 2)
            ]
        )
        repo = MemoryProductReadRepository(store)

        provider = await repo.get_all(Pagination(), Sort.parse("name"))
        assert provider.keys == [1, 2, 3]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("sort", ["price", "-price", "name", "-name"])
    async def test_ties_ascending_by_id_in_both_directions(self, sort: str) -> None:
        store = CatalogStore()
        main = Category(id=1, name="Main")
        store.add_products(
            [
                Product(id=i, code=str(i), name="Same", category=main, price=Price(new=100))
                for i in (2, 3, 1)
            ]
        )
        repo = MemoryProductReadRepository(store)

        provider = await repo.get_all(Pagination(), Sort.parse(sort))
        assert provider.keys == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_descending_price_keeps_id_ties_ascending(self) -> None:
        store = CatalogStore()
        main = Category(id=1, name="Main")
        store.add_products(
            [
                Product(id=1, code="1", name="A", category=main, price=Price(new=100)),
                Product(id=2, code="2", name="B", category=main, price=Price(new=300)),
                Product(id=3, code="3", name="C", category=main, price=Price(new=100)),
            ]
        )
        repo = MemoryProductReadRepository(store)

        provider = await repo.get_all(Pagination(), Sort.parse("-price"))
        assert provider.keys == [2, 1, 3]

    @pytest.mark.asyncio
    async def test_get_all_by_category(self, store: CatalogStore) -> None:
        repo = MemoryProductReadRepository(store)
        provider = await repo.get_all_by_category(store.categories[7], Pagination(), Sort.parse("id"))
        assert provider.keys == [42, 43]

    @pytest.mark.asyncio
    async def test_get_all_by_tag(self, store: CatalogStore) -> None:
        repo = MemoryProductReadRepository(store)
        provider = await repo.get_all_by_tag(store.tags[1], Pagination(), Sort.parse("-id"))
        assert provider.keys == [43, 42]


class TestMemoryLookupRepositories:
    """Tests for category and tag lookups."""

    @pytest.mark.asyncio
    async def test_category_find(self, store: CatalogStore) -> None:
        repo = MemoryCategoryReadRepository(store)
        assert (await repo.find("9")).name == "Empty"
        assert await repo.find("0") is None

    @pytest.mark.asyncio
    async def test_tag_find(self, store: CatalogStore) -> None:
        repo = MemoryTagReadRepository(store)
        assert (await repo.find(3)).name == "unused"
        assert await repo.find("") is None
