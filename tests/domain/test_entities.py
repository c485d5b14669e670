"""Tests for catalog entities and value objects."""

import pytest

from catalog_api.domain.entities import Category, Photo, Product, Tag
from catalog_api.domain.exceptions import EntityNotFoundError, InvalidPriceError
from catalog_api.domain.value_objects import Price

MAIN = Category(id=1, name="Main")
SEVEN = Category(id=7, name="Seven")


def make_product(**overrides) -> Product:
    fields = {
        "id": 1,
        "code": "SKU-1",
        "name": "Thing",
        "category": MAIN,
        "price": Price(new=100),
    }
    fields.update(overrides)
    return Product(**fields)


class TestPrice:
    """Tests for Price value object."""

    def test_old_price_optional(self) -> None:
        price = Price(new=100)
        assert price.old is None
        assert not price.is_discounted

    def test_discounted(self) -> None:
        assert Price(new=80, old=100).is_discounted
        assert not Price(new=120, old=100).is_discounted

    @pytest.mark.parametrize(("new", "old", "field"), [(-1, None, "new"), (10, -5, "old")])
    def test_negative_amount_rejected(self, new: int, old: int | None, field: str) -> None:
        with pytest.raises(InvalidPriceError) as exc_info:
            Price(new=new, old=old)
        assert exc_info.value.details["field"] == field

    def test_compared_by_value(self) -> None:
        assert Price(new=1, old=2) == Price(new=1, old=2)


class TestEntityIdentity:
    """Entities compare and hash by id."""

    def test_equal_by_id(self) -> None:
        assert Category(id=1, name="A") == Category(id=1, name="B")
        assert Category(id=1, name="A") != Category(id=2, name="A")

    def test_different_types_not_equal(self) -> None:
        assert Category(id=1, name="A") != Tag(id=1, name="A")

    def test_hash_by_id(self) -> None:
        assert len({Tag(id=1, name="a"), Tag(id=1, name="b")}) == 1


class TestProduct:
    """Tests for Product entity."""

    def test_primary_removed_from_additional(self) -> None:
        product = make_product(categories=(MAIN, SEVEN))
        assert product.categories == (SEVEN,)
        assert product.all_categories == (MAIN, SEVEN)

    def test_duplicates_removed(self) -> None:
        new = Tag(id=1, name="new")
        product = make_product(categories=(SEVEN, SEVEN), tags=(new, new))
        assert product.categories == (SEVEN,)
        assert product.tags == (new,)

    def test_in_category(self) -> None:
        product = make_product(categories=(SEVEN,))
        assert product.in_category(1)
        assert product.in_category(7)
        assert not product.in_category(8)

    def test_has_tag(self) -> None:
        product = make_product(tags=(Tag(id=2, name="eco"),))
        assert product.has_tag(2)
        assert not product.has_tag(1)

    def test_frozen(self) -> None:
        product = make_product()
        with pytest.raises(AttributeError):
            product.name = "Other"  # type: ignore[misc]


class TestPhoto:
    """Tests for Photo thumbnails."""

    def test_thumbnail_url(self) -> None:
        photo = Photo(id=12, file="Front.JPG")
        url = photo.thumbnail_url("file", "catalog_list", "http://static.test/")
        assert url == "http://static.test/cache/file/catalog_list_12.jpg"

    def test_thumbnail_without_extension(self) -> None:
        photo = Photo(id=3, file="raw")
        assert photo.thumbnail_url("file", "p", "http://s") == "http://s/cache/file/p_3"


class TestExceptions:
    """Tests for domain exceptions."""

    def test_entity_not_found(self) -> None:
        error = EntityNotFoundError("Product", "abc")
        assert error.entity_type == "Product"
        assert error.entity_id == "abc"
        assert str(error) == "Product not found: abc"
        assert error.details == {"entity_type": "Product", "entity_id": "abc"}
