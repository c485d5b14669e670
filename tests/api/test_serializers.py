"""Tests for product serializers."""

import pytest

from catalog_api.api.serializers import serialize_detail_view, serialize_list_item
from catalog_api.api.urls import UrlBuilder
from catalog_api.domain.entities import Category, Photo, Product, Tag
from catalog_api.domain.value_objects import Price
from catalog_api.main import app


@pytest.fixture
def urls() -> UrlBuilder:
    """URL builder over the real routes with a fixed host."""
    return UrlBuilder("https://api.example.com/", app)


@pytest.fixture
def product() -> Product:
    """Product with two additional categories and no photo."""
    return Product(
        id=42,
        code="P42",
        name="Example",
        category=Category(id=1, name="Main"),
        categories=(Category(id=7, name="Seven"), Category(id=8, name="Eight")),
        price=Price(new=1000),
    )


class TestUrlBuilder:
    """Tests for UrlBuilder."""

    def test_absolute_url_for_route(self, urls: UrlBuilder) -> None:
        assert urls.absolute_url("items:view", product_id=7) == "https://api.example.com/items/7"
        assert (
            urls.absolute_url("items:category", category_id=3)
            == "https://api.example.com/items/category/3"
        )

    def test_to_path_with_query(self, urls: UrlBuilder) -> None:
        assert urls.to("/cart/add", id=5) == "https://api.example.com/cart/add?id=5"
        assert urls.to("cart/add") == "https://api.example.com/cart/add"


class TestSerializeListItem:
    """Tests for serialize_list_item."""

    def test_shape(self, product: Product, urls: UrlBuilder) -> None:
        data = serialize_list_item(product, urls)

        assert set(data) == {"id", "code", "name", "category", "price", "thumbnail", "_links"}
        assert data["category"]["_links"]["self"]["href"] == (
            "https://api.example.com/items/category/1"
        )
        assert data["_links"]["self"]["href"] == "https://api.example.com/items/42"
        assert data["_links"]["cart"]["href"] == "https://api.example.com/cart/add?id=42"

    def test_price_always_has_both_fields(self, product: Product, urls: UrlBuilder) -> None:
        assert serialize_list_item(product, urls)["price"] == {"new": 1000, "old": None}

    def test_thumbnail_null_without_photo(self, product: Product, urls: UrlBuilder) -> None:
        assert serialize_list_item(product, urls)["thumbnail"] is None

    def test_thumbnail_with_photo(self, urls: UrlBuilder) -> None:
        product = Product(
            id=1,
            code="A",
            name="A",
            category=Category(id=1, name="Main"),
            price=Price(new=1),
            main_photo=Photo(id=9, file="a.PNG"),
        )
        thumbnail = serialize_list_item(product, urls)["thumbnail"]
        assert thumbnail.endswith("/cache/file/catalog_list_9.png")


class TestSerializeDetailView:
    """Tests for serialize_detail_view."""

    def test_matches_example(self, product: Product, urls: UrlBuilder) -> None:
        data = serialize_detail_view(product, urls)

        assert data["id"] == 42
        assert data["code"] == "P42"
        assert data["categories"]["main"]["id"] == 1
        assert [c["id"] for c in data["categories"]["other"]] == [7, 8]
        assert data["price"] == {"new": 1000, "old": None}
        assert data["tags"] == []

    def test_other_excludes_primary(self, urls: UrlBuilder) -> None:
        main = Category(id=1, name="Main")
        product = Product(
            id=1,
            code="A",
            name="A",
            category=main,
            categories=(main, Category(id=2, name="Two")),
            price=Price(new=1),
        )
        other = serialize_detail_view(product, urls)["categories"]["other"]
        assert [c["id"] for c in other] == [2]

    def test_tag_links(self, product: Product, urls: UrlBuilder) -> None:
        tagged = Product(
            id=product.id,
            code=product.code,
            name=product.name,
            category=product.category,
            price=product.price,
            tags=(Tag(id=4, name="four"),),
        )
        tags = serialize_detail_view(tagged, urls)["tags"]
        assert tags == [
            {
                "id": 4,
                "name": "four",
                "_links": {"self": {"href": "https://api.example.com/items/tag/4"}},
            }
        ]
