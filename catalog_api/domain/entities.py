"""Catalog entities.

Read-only snapshots of the catalog data owned by the data store:
Category, Tag, Photo and Product.
"""

from dataclasses import dataclass, field
from pathlib import PurePosixPath

from catalog_api.domain.base import Entity
from catalog_api.domain.value_objects import Price


@dataclass(frozen=True, eq=False)
class Category(Entity[int]):
    """Product category."""

    name: str


@dataclass(frozen=True, eq=False)
class Tag(Entity[int]):
    """Free-form product tag."""

    name: str


@dataclass(frozen=True, eq=False)
class Photo(Entity[int]):
    """Uploaded product photo.

    Attributes:
        id: Photo identifier.
        file: Stored file name (e.g. "front.jpg").
    """

    file: str

    @property
    def extension(self) -> str:
        """Get file extension without the leading dot."""
        return PurePosixPath(self.file).suffix.lstrip(".").lower()

    def thumbnail_url(self, attribute: str, profile: str, base_url: str) -> str:
        """Get URL of a generated thumbnail.

        Thumbnails live in the static cache directory, one file per
        uploaded attribute and thumbnail profile.

        Args:
            attribute: Upload attribute the file belongs to (e.g. "file").
            profile: Thumbnail profile name (e.g. "catalog_list").
            base_url: Static host base URL.

        Returns:
            Absolute thumbnail URL.
        """
        name = f"{profile}_{self.id}"
        if self.extension:
            name = f"{name}.{self.extension}"
        return f"{base_url.rstrip('/')}/cache/{attribute}/{name}"


@dataclass(frozen=True, eq=False)
class Product(Entity[int]):
    """Catalog product.

    Every product has exactly one primary category. The additional
    categories never contain the primary one; duplicates are dropped
    on construction.

    Attributes:
        id: Product identifier.
        code: Merchant code (SKU).
        name: Display name.
        category: Primary category.
        price: Current and previous price.
        description: Long description.
        categories: Additional categories.
        tags: Assigned tags.
        main_photo: Primary photo, if any.
    """

    code: str
    name: str
    category: Category
    price: Price
    description: str | None = None
    categories: tuple[Category, ...] = field(default_factory=tuple)
    tags: tuple[Tag, ...] = field(default_factory=tuple)
    main_photo: Photo | None = None

    def __post_init__(self) -> None:
        """Normalize additional categories and tags."""
        seen = {self.category.id}
        others = []
        for category in self.categories:
            if category.id not in seen:
                seen.add(category.id)
                others.append(category)
        object.__setattr__(self, "categories", tuple(others))
        object.__setattr__(self, "tags", tuple(dict.fromkeys(self.tags)))

    @property
    def all_categories(self) -> tuple[Category, ...]:
        """Get primary category followed by additional ones."""
        return (self.category, *self.categories)

    def in_category(self, category_id: int) -> bool:
        """Check if product belongs to a category (primary or additional).

        Args:
            category_id: Category identifier.

        Returns:
            True if assigned to the category.
        """
        return any(c.id == category_id for c in self.all_categories)

    def has_tag(self, tag_id: int) -> bool:
        """Check if product carries a tag.

        Args:
            tag_id: Tag identifier.

        Returns:
            True if the tag is assigned.
        """
        return any(t.id == tag_id for t in self.tags)
