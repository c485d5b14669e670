"""FastAPI dependencies shared by the catalog routes."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Query, Request

from catalog_api.application.catalog_service import CatalogService
from catalog_api.application.pagination import Pagination, Sort
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.memory import (
    MemoryCategoryReadRepository,
    MemoryProductReadRepository,
    MemoryTagReadRepository,
)


async def get_catalog_service(request: Request) -> AsyncGenerator[CatalogService, None]:
    """Get catalog service wired to the configured storage backend.

    Yields:
        CatalogService bound to the request's repositories.
    """
    request_id = getattr(request.state, "request_id", None)

    if settings.storage_backend == "database":
        from catalog_api.infrastructure.database import get_session_factory
        from catalog_api.infrastructure.repositories import (
            SqlCategoryReadRepository,
            SqlProductReadRepository,
            SqlTagReadRepository,
        )

        async with get_session_factory()() as session:
            yield CatalogService(
                SqlProductReadRepository(session),
                SqlCategoryReadRepository(session),
                SqlTagReadRepository(session),
                request_id=request_id,
            )
        return

    yield CatalogService(
        MemoryProductReadRepository(),
        MemoryCategoryReadRepository(),
        MemoryTagReadRepository(),
        request_id=request_id,
    )


def _int_param(value: str | None, default: int) -> int:
    """Read an integer query parameter, falling back to a default."""
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def get_pagination(
    page: Annotated[str | None, Query(description="Page number (1-based)")] = None,
    per_page: Annotated[
        str | None,
        Query(alias="per-page", description="Items per page"),
    ] = None,
) -> Pagination:
    """Read pagination query parameters.

    Non-numeric values fall back to the defaults. Out-of-range values
    are clamped: pages below 1 become 1 and page sizes are bounded to
    ``[1, max_page_size]``.
    """
    return Pagination(
        page=_int_param(page, 1),
        page_size=_int_param(per_page, settings.default_page_size),
        page_size_limit=(1, settings.max_page_size),
    )


def get_sort(
    sort: Annotated[
        str | None,
        Query(description="Sort field: id, name or price; prefix with '-' for descending"),
    ] = None,
) -> Sort:
    """Read the sort query parameter."""
    return Sort.parse(sort)
