"""Read repository interfaces used by the catalog service.

Implementations live in the infrastructure layer (in-memory and
SQLAlchemy). Lookups return ``None`` for identifiers that do not
resolve, including identifiers of the wrong shape.
"""

from typing import Any, Protocol

from catalog_api.application.pagination import DataProvider, Pagination, Sort
from catalog_api.domain.entities import Category, Product, Tag


class ProductReadRepository(Protocol):
    """Product lookups and listings."""

    async def find(self, product_id: Any) -> Product | None: ...

    async def get_all(self, pagination: Pagination, sort: Sort) -> DataProvider[Product]: ...

    async def get_all_by_category(
        self, category: Category, pagination: Pagination, sort: Sort
    ) -> DataProvider[Product]: ...

    async def get_all_by_tag(
        self, tag: Tag, pagination: Pagination, sort: Sort
    ) -> DataProvider[Product]: ...


class CategoryReadRepository(Protocol):
    """Category lookups."""

    async def find(self, category_id: Any) -> Category | None: ...


class TagReadRepository(Protocol):
    """Tag lookups."""

    async def find(self, tag_id: Any) -> Tag | None: ...


# Identifier columns are signed 32-bit integers
MAX_ID = 2**31 - 1


def parse_id(value: Any) -> int | None:
    """Coerce a raw identifier to an integer key.

    Strings must be plain ASCII digits. Values outside the identifier
    column range never resolve.

    Args:
        value: Identifier as received (path string, int, ...).

    Returns:
        Integer id, or None when the value cannot be an id.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        key = value
    elif isinstance(value, str) and value.isascii() and value.isdigit():
        key = int(value)
    else:
        return None
    return key if 0 <= key <= MAX_ID else None
