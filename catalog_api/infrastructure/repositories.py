"""SQLAlchemy read repositories for the catalog.

Each repository is bound to one async session and returns domain
entities, never ORM rows.
"""

from typing import Any

from sqlalchemy import ColumnElement, Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from catalog_api.application.pagination import DataProvider, Pagination, Sort
from catalog_api.application.repositories import parse_id
from catalog_api.domain.entities import Category, Product, Tag
from catalog_api.infrastructure.models import CategoryModel, ProductModel, TagModel


class SqlProductReadRepository:
    """Product read repository backed by the database.

    Example usage:
        async with get_session_factory()() as session:
            repo = SqlProductReadRepository(session)
            provider = await repo.get_all(Pagination(page=2), Sort.parse("-price"))
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def find(self, product_id: Any) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Raw product identifier.

        Returns:
            Product if found, None otherwise.
        """
        key = parse_id(product_id)
        if key is None:
            return None

        query = self._with_relations(select(ProductModel).where(ProductModel.id == key))
        result = await self.session.execute(query)
        row = result.unique().scalar_one_or_none()
        return row.to_entity() if row else None

    async def get_all(self, pagination: Pagination, sort: Sort) -> DataProvider[Product]:
        """List all products.

        Args:
            pagination: Requested page; total_count is filled in.
            sort: Requested order.

        Returns:
            One page of products.
        """
        return await self._paginate(None, pagination, sort)

    async def get_all_by_category(
        self,
        category: Category,
        pagination: Pagination,
        sort: Sort,
    ) -> DataProvider[Product]:
        """List products whose primary or additional category matches.

        Args:
            category: Category to filter by.
            pagination: Requested page; total_count is filled in.
            sort: Requested order.

        Returns:
            One page of products in the category.
        """
        condition = or_(
            ProductModel.category_id == category.id,
            ProductModel.categories.any(CategoryModel.id == category.id),
        )
        return await self._paginate(condition, pagination, sort)

    async def get_all_by_tag(
        self,
        tag: Tag,
        pagination: Pagination,
        sort: Sort,
    ) -> DataProvider[Product]:
        """List products carrying a tag.

        Args:
            tag: Tag to filter by.
            pagination: Requested page; total_count is filled in.
            sort: Requested order.

        Returns:
            One page of tagged products.
        """
        condition = ProductModel.tags.any(TagModel.id == tag.id)
        return await self._paginate(condition, pagination, sort)

    async def _paginate(
        self,
        condition: ColumnElement[bool] | None,
        pagination: Pagination,
        sort: Sort,
    ) -> DataProvider[Product]:
        """Count, then fetch the requested page.

        Args:
            condition: Optional filter.
            pagination: Requested page.
            sort: Requested order.

        Returns:
            Data provider for the page.
        """
        count_query = select(func.count(ProductModel.id))
        query = select(ProductModel)
        if condition is not None:
            count_query = count_query.where(condition)
            query = query.where(condition)

        pagination.total_count = (await self.session.execute(count_query)).scalar_one()

        column = self._get_sort_column(sort.field)
        order = column.desc() if sort.descending else column.asc()
        query = query.order_by(order, ProductModel.id.asc())
        query = query.limit(pagination.limit).offset(pagination.offset)

        result = await self.session.execute(self._with_relations(query))
        models = [row.to_entity() for row in result.unique().scalars().all()]
        return DataProvider(models=models, pagination=pagination, sort=sort)

    @staticmethod
    def _with_relations(query: Select[Any]) -> Select[Any]:
        """Eagerly load everything the serializers touch."""
        return query.options(
            joinedload(ProductModel.category),
            joinedload(ProductModel.main_photo),
            selectinload(ProductModel.categories),
            selectinload(ProductModel.tags),
        )

    @staticmethod
    def _get_sort_column(sort_by: str) -> Any:
        """Get SQLAlchemy column for sorting.

        Args:
            sort_by: Sort field name.

        Returns:
            SQLAlchemy column.
        """
        columns = {
            "id": ProductModel.id,
            "name": ProductModel.name,
            "price": ProductModel.price_new,
        }
        return columns.get(sort_by, ProductModel.id)


class SqlCategoryReadRepository:
    """Category read repository backed by the database."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find(self, category_id: Any) -> Category | None:
        """Get category by ID."""
        key = parse_id(category_id)
        if key is None:
            return None
        row = await self.session.get(CategoryModel, key)
        return row.to_entity() if row else None


class SqlTagReadRepository:
    """Tag read repository backed by the database."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find(self, tag_id: Any) -> Tag | None:
        """Get tag by ID."""
        key = parse_id(tag_id)
        if key is None:
            return None
        row = await self.session.get(TagModel, key)
        return row.to_entity() if row else None
