"""Product serializers.

Turn catalog entities into JSON-ready dictionaries with embedded
``_links``. All links are absolute and built through ``UrlBuilder``.
"""

from typing import Any

from catalog_api.api.urls import UrlBuilder
from catalog_api.domain.entities import Category, Product, Tag
from catalog_api.domain.value_objects import Price
from catalog_api.infrastructure.config import settings

PHOTO_ATTRIBUTE = "file"


def _link(href: str) -> dict[str, str]:
    return {"href": href}


def serialize_category(category: Category, urls: UrlBuilder) -> dict[str, Any]:
    """Category summary with a link to its product listing."""
    return {
        "id": category.id,
        "name": category.name,
        "_links": {
            "self": _link(urls.absolute_url("items:category", category_id=category.id)),
        },
    }


def serialize_tag(tag: Tag, urls: UrlBuilder) -> dict[str, Any]:
    """Tag summary with a link to its product listing."""
    return {
        "id": tag.id,
        "name": tag.name,
        "_links": {
            "self": _link(urls.absolute_url("items:tag", tag_id=tag.id)),
        },
    }


def serialize_price(price: Price) -> dict[str, int | None]:
    return {
        "new": price.new,
        "old": price.old,
    }


def serialize_list_item(product: Product, urls: UrlBuilder) -> dict[str, Any]:
    """Serialize a product for collection endpoints.

    Args:
        product: Product to serialize.
        urls: URL builder for the current request.

    Returns:
        List item representation.
    """
    thumbnail = None
    if product.main_photo is not None:
        thumbnail = product.main_photo.thumbnail_url(
            PHOTO_ATTRIBUTE,
            settings.thumbnail_profile,
            settings.static_base_url,
        )

    return {
        "id": product.id,
        "code": product.code,
        "name": product.name,
        "category": serialize_category(product.category, urls),
        "price": serialize_price(product.price),
        "thumbnail": thumbnail,
        "_links": {
            "self": _link(urls.absolute_url("items:view", product_id=product.id)),
            "cart": _link(urls.to(settings.cart_add_path, id=product.id)),
        },
    }


def serialize_detail_view(product: Product, urls: UrlBuilder) -> dict[str, Any]:
    """Serialize a product for the detail endpoint.

    Args:
        product: Product to serialize.
        urls: URL builder for the current request.

    Returns:
        Detail view representation.
    """
    return {
        "id": product.id,
        "code": product.code,
        "name": product.name,
        "description": product.description,
        "categories": {
            "main": serialize_category(product.category, urls),
            "other": [serialize_category(c, urls) for c in product.categories],
        },
        "tags": [serialize_tag(t, urls) for t in product.tags],
        "price": serialize_price(product.price),
        "_links": {
            "self": _link(urls.absolute_url("items:view", product_id=product.id)),
        },
    }
