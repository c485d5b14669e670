"""Catalog API endpoints.

Read-only product listing, filtering by category or tag, and the
product detail view. Collection endpoints wrap the repository result
in a ``MapDataProvider`` so items are serialized lazily.
"""

from functools import partial
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from catalog_api.api.collection import serialize_collection
from catalog_api.api.dependencies import get_catalog_service, get_pagination, get_sort
from catalog_api.api.schemas import ErrorResponse, ProductCollectionSchema, ProductViewSchema
from catalog_api.api.serializers import serialize_detail_view, serialize_list_item
from catalog_api.api.urls import UrlBuilder, get_url_builder
from catalog_api.application.catalog_service import CatalogService
from catalog_api.application.pagination import DataProvider, MapDataProvider, Pagination, Sort
from catalog_api.domain.entities import Product
from catalog_api.domain.exceptions import EntityNotFoundError

router = APIRouter(prefix="/items", tags=["Catalog"])

NOT_FOUND_MESSAGE = "The requested page does not exist."

COLLECTION_RESPONSES: dict[int | str, dict[str, Any]] = {
    401: {"model": ErrorResponse},
}
LOOKUP_RESPONSES: dict[int | str, dict[str, Any]] = {
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


# ============================================================================
# Helpers
# ============================================================================


def not_found() -> HTTPException:
    """Build the 404 raised for unresolved identifiers."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "error_code": "NOT_FOUND",
            "message": NOT_FOUND_MESSAGE,
        },
    )


def render_collection(
    provider: DataProvider[Product],
    urls: UrlBuilder,
    request: Request,
    response: Response,
) -> dict[str, Any]:
    """Serialize a page of products as a collection envelope."""
    items = MapDataProvider(provider, partial(serialize_list_item, urls=urls))
    return serialize_collection(items, request, response)


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    name="items:index",
    response_model=ProductCollectionSchema,
    response_model_exclude_unset=True,
    responses=COLLECTION_RESPONSES,
    summary="List products",
    description="Get a paginated list of all products.",
)
async def list_products(
    request: Request,
    response: Response,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    urls: Annotated[UrlBuilder, Depends(get_url_builder)],
    pagination: Annotated[Pagination, Depends(get_pagination)],
    sort: Annotated[Sort, Depends(get_sort)],
) -> dict[str, Any]:
    """List all products.

    Returns:
        Collection envelope of product list items.
    """
    provider = await service.list_products(pagination, sort)
    return render_collection(provider, urls, request, response)


@router.get(
    "/category/{category_id}",
    name="items:category",
    response_model=ProductCollectionSchema,
    response_model_exclude_unset=True,
    responses=LOOKUP_RESPONSES,
    summary="List products in a category",
    description="Get a paginated list of products whose primary or additional category matches.",
)
async def list_by_category(
    category_id: str,
    request: Request,
    response: Response,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    urls: Annotated[UrlBuilder, Depends(get_url_builder)],
    pagination: Annotated[Pagination, Depends(get_pagination)],
    sort: Annotated[Sort, Depends(get_sort)],
) -> dict[str, Any]:
    """List products in a category.

    Args:
        category_id: Category identifier.

    Returns:
        Collection envelope of product list items.

    Raises:
        HTTPException: If category not found.
    """
    try:
        provider = await service.list_by_category(category_id, pagination, sort)
    except EntityNotFoundError:
        raise not_found() from None
    return render_collection(provider, urls, request, response)


@router.get(
    "/tag/{tag_id}",
    name="items:tag",
    response_model=ProductCollectionSchema,
    response_model_exclude_unset=True,
    responses=LOOKUP_RESPONSES,
    summary="List products with a tag",
    description="Get a paginated list of products carrying the tag.",
)
async def list_by_tag(
    tag_id: str,
    request: Request,
    response: Response,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    urls: Annotated[UrlBuilder, Depends(get_url_builder)],
    pagination: Annotated[Pagination, Depends(get_pagination)],
    sort: Annotated[Sort, Depends(get_sort)],
) -> dict[str, Any]:
    """List products with a tag.

    Args:
        tag_id: Tag identifier.

    Returns:
        Collection envelope of product list items.

    Raises:
        HTTPException: If tag not found.
    """
    try:
        provider = await service.list_by_tag(tag_id, pagination, sort)
    except EntityNotFoundError:
        raise not_found() from None
    return render_collection(provider, urls, request, response)


@router.get(
    "/{product_id}",
    name="items:view",
    response_model=ProductViewSchema,
    responses=LOOKUP_RESPONSES,
    summary="Get product details",
    description="Get the full representation of a single product.",
)
async def view_product(
    product_id: str,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    urls: Annotated[UrlBuilder, Depends(get_url_builder)],
) -> dict[str, Any]:
    """Get a product by ID.

    Args:
        product_id: Product identifier.

    Returns:
        Product detail view.

    Raises:
        HTTPException: If product not found.
    """
    try:
        product = await service.get_product(product_id)
    except EntityNotFoundError:
        raise not_found() from None
    return serialize_detail_view(product, urls)
