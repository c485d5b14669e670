"""Tests for the catalog application service."""

import pytest

from catalog_api.application.catalog_service import CatalogService
from catalog_api.application.pagination import Pagination, Sort
from catalog_api.application.repositories import parse_id
from catalog_api.catalog.generator import GeneratedCatalog
from catalog_api.domain.exceptions import EntityNotFoundError
from catalog_api.infrastructure.memory import (
    CatalogStore,
    MemoryCategoryReadRepository,
    MemoryProductReadRepository,
    MemoryTagReadRepository,
)


@pytest.fixture
def service(fixture_catalog: GeneratedCatalog) -> CatalogService:
    """Service over a private store holding the fixture catalog."""
    store = CatalogStore()
    store.add_categories(fixture_catalog.categories)
    store.add_tags(fixture_catalog.tags)
    store.add_products(fixture_catalog.products)
    return CatalogService(
        products=MemoryProductReadRepository(store),
        categories=MemoryCategoryReadRepository(store),
        tags=MemoryTagReadRepository(store),
        request_id="test-request",
    )


class TestParseId:
    """Tests for identifier parsing."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (42, 42),
            ("42", 42),
            ("2147483647", 2147483647),
            ("2147483648", None),
            ("99999999999999999999", None),
            (2**40, None),
            (-1, None),
            (" 7 ", None),
            ("+43", None),
            ("-1", None),
            ("\u0664\u0663", None),
            ("1_0", None),
            ("abc", None),
            ("4.2", None),
            (None, None),
        ],
    )
    def test_parse_id(self, raw, expected) -> None:
        assert parse_id(raw) == expected

    def test_bool_rejected(self) -> None:
        assert parse_id(True) is None


class TestCatalogService:
    """Tests for CatalogService."""

    @pytest.mark.asyncio
    async def test_list_products(self, service: CatalogService) -> None:
        provider = await service.list_products(Pagination(page_size=2), Sort.parse(None))

        assert provider.total_count == 3
        assert provider.keys == [44, 43]
        assert provider.pagination.page_count == 2

    @pytest.mark.asyncio
    async def test_list_by_category(self, service: CatalogService) -> None:
        provider = await service.list_by_category("8", Pagination(), Sort.parse("id"))
        assert provider.keys == [42, 44]

    @pytest.mark.asyncio
    async def test_list_by_empty_category(self, service: CatalogService) -> None:
        provider = await service.list_by_category(9, Pagination(), Sort.parse(None))
        assert provider.total_count == 0
        assert list(provider) == []

    @pytest.mark.asyncio
    async def test_list_by_tag(self, service: CatalogService) -> None:
        provider = await service.list_by_tag("2", Pagination(), Sort.parse(None))
        assert provider.keys == [43]

    @pytest.mark.asyncio
    async def test_get_product(self, service: CatalogService) -> None:
        product = await service.get_product("42")
        assert product.code == "P42"
        assert [c.id for c in product.categories] == [7, 8]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("product_id", ["999", "abc", None])
    async def test_get_product_not_found(self, service: CatalogService, product_id) -> None:
        with pytest.raises(EntityNotFoundError) as exc_info:
            await service.get_product(product_id)
        assert exc_info.value.entity_type == "Product"

    @pytest.mark.asyncio
    async def test_unknown_category(self, service: CatalogService) -> None:
        with pytest.raises(EntityNotFoundError) as exc_info:
            await service.list_by_category("999", Pagination(), Sort.parse(None))
        assert exc_info.value.entity_type == "Category"

    @pytest.mark.asyncio
    async def test_unknown_tag(self, service: CatalogService) -> None:
        with pytest.raises(EntityNotFoundError) as exc_info:
            await service.list_by_tag("x", Pagination(), Sort.parse(None))
        assert exc_info.value.entity_type == "Tag"
