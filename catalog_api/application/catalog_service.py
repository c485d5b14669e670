"""Catalog application service.

Resolves catalog lookups against the read repositories and turns
unresolved identifiers into ``EntityNotFoundError``.
"""

from typing import Any, NoReturn

import structlog

from catalog_api.application.pagination import DataProvider, Pagination, Sort
from catalog_api.application.repositories import (
    CategoryReadRepository,
    ProductReadRepository,
    TagReadRepository,
)
from catalog_api.domain.entities import Category, Product, Tag
from catalog_api.domain.exceptions import EntityNotFoundError

logger = structlog.get_logger()


class CatalogService:
    """Application service for read-only catalog operations.

    Example usage:
        service = CatalogService(products, categories, tags)
        provider = await service.list_by_category("7", Pagination(), Sort())
    """

    def __init__(
        self,
        products: ProductReadRepository,
        categories: CategoryReadRepository,
        tags: TagReadRepository,
        request_id: str | None = None,
    ) -> None:
        """Initialize service.

        Args:
            products: Product read repository.
            categories: Category read repository.
            tags: Tag read repository.
            request_id: Request ID for correlation.
        """
        self.products = products
        self.categories = categories
        self.tags = tags
        self.request_id = request_id

    async def list_products(self, pagination: Pagination, sort: Sort) -> DataProvider[Product]:
        """List all products.

        Args:
            pagination: Requested page.
            sort: Requested order.

        Returns:
            One page of products.
        """
        return await self.products.get_all(pagination, sort)

    async def list_by_category(
        self,
        category_id: Any,
        pagination: Pagination,
        sort: Sort,
    ) -> DataProvider[Product]:
        """List products assigned to a category.

        Args:
            category_id: Category identifier.
            pagination: Requested page.
            sort: Requested order.

        Returns:
            One page of products in the category.

        Raises:
            EntityNotFoundError: If the category does not exist.
        """
        category = await self.get_category(category_id)
        return await self.products.get_all_by_category(category, pagination, sort)

    async def list_by_tag(
        self,
        tag_id: Any,
        pagination: Pagination,
        sort: Sort,
    ) -> DataProvider[Product]:
        """List products carrying a tag.

        Args:
            tag_id: Tag identifier.
            pagination: Requested page.
            sort: Requested order.

        Returns:
            One page of tagged products.

        Raises:
            EntityNotFoundError: If the tag does not exist.
        """
        tag = await self.get_tag(tag_id)
        return await self.products.get_all_by_tag(tag, pagination, sort)

    async def get_product(self, product_id: Any) -> Product:
        """Get a product by ID.

        Raises:
            EntityNotFoundError: If the product does not exist.
        """
        product = await self.products.find(product_id)
        if product is None:
            self._not_found("Product", product_id)
        return product

    async def get_category(self, category_id: Any) -> Category:
        """Get a category by ID.

        Raises:
            EntityNotFoundError: If the category does not exist.
        """
        category = await self.categories.find(category_id)
        if category is None:
            self._not_found("Category", category_id)
        return category

    async def get_tag(self, tag_id: Any) -> Tag:
        """Get a tag by ID.

        Raises:
            EntityNotFoundError: If the tag does not exist.
        """
        tag = await self.tags.find(tag_id)
        if tag is None:
            self._not_found("Tag", tag_id)
        return tag

    def _not_found(self, entity_type: str, entity_id: Any) -> NoReturn:
        logger.info(
            "Catalog lookup failed",
            entity_type=entity_type,
            entity_id=str(entity_id),
            request_id=self.request_id,
        )
        raise EntityNotFoundError(entity_type, entity_id)
