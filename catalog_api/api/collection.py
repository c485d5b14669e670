"""Collection envelope for paginated endpoints.

Renders a data provider as ``{items, _links, _meta}`` and mirrors the
pagination state into ``X-Pagination-*`` and ``Link`` headers.
"""

from typing import Any

from fastapi import Request, Response

from catalog_api.application.pagination import MapDataProvider, Pagination

PAGE_PARAM = "page"
PAGE_SIZE_PARAM = "per-page"

TOTAL_COUNT_HEADER = "X-Pagination-Total-Count"
PAGE_COUNT_HEADER = "X-Pagination-Page-Count"
CURRENT_PAGE_HEADER = "X-Pagination-Current-Page"
PER_PAGE_HEADER = "X-Pagination-Per-Page"


def _page_url(request: Request, page: int, page_size: int) -> str:
    return str(
        request.url.include_query_params(**{PAGE_PARAM: page, PAGE_SIZE_PARAM: page_size})
    )


def pagination_links(request: Request, pagination: Pagination) -> dict[str, str]:
    """Build navigation links for the current page.

    Args:
        request: Current request (its URL is the template).
        pagination: Pagination state with total_count set.

    Returns:
        Mapping of relation name to URL.
    """
    current = pagination.current_page
    size = pagination.page_size
    links = {
        "self": _page_url(request, current, size),
        "first": _page_url(request, 1, size),
        "last": _page_url(request, max(pagination.page_count, 1), size),
    }
    if pagination.has_prev:
        links["prev"] = _page_url(request, current - 1, size)
    if pagination.has_next:
        links["next"] = _page_url(request, current + 1, size)
    return links


def serialize_collection(
    provider: MapDataProvider[Any, dict[str, Any]],
    request: Request,
    response: Response,
) -> dict[str, Any]:
    """Render a mapped data provider as a collection envelope.

    Args:
        provider: Data provider yielding serialized items.
        request: Current request.
        response: Response whose headers receive the pagination state.

    Returns:
        Collection envelope.
    """
    pagination = provider.pagination
    links = pagination_links(request, pagination)

    response.headers[TOTAL_COUNT_HEADER] = str(pagination.total_count)
    response.headers[PAGE_COUNT_HEADER] = str(pagination.page_count)
    response.headers[CURRENT_PAGE_HEADER] = str(pagination.current_page)
    response.headers[PER_PAGE_HEADER] = str(pagination.page_size)
    response.headers["Link"] = ", ".join(f"<{url}>; rel={rel}" for rel, url in links.items())

    return {
        "items": list(provider),
        "_links": {rel: {"href": url} for rel, url in links.items()},
        "_meta": {
            "totalCount": pagination.total_count,
            "pageCount": pagination.page_count,
            "currentPage": pagination.current_page,
            "perPage": pagination.page_size,
        },
    }
