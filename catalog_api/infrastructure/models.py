"""SQLAlchemy models for the product catalog.

Defines categories, tags, photos and products together with the
product/category and product/tag assignment tables.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.domain.entities import Category, Photo, Product, Tag
from catalog_api.domain.value_objects import Price
from catalog_api.infrastructure.database import Base

# Additional (non-primary) category assignments
product_categories = Table(
    "product_categories",
    Base.metadata,
    Column("product_id", ForeignKey("products.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
)

product_tags = Table(
    "product_tags",
    Base.metadata,
    Column("product_id", ForeignKey("products.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class CategoryModel(Base):
    """Category row."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        """String representation."""
        return f"<CategoryModel(id={self.id}, name={self.name})>"

    def to_entity(self) -> Category:
        """Convert to domain entity."""
        return Category(id=self.id, name=self.name)


class TagModel(Base):
    """Tag row."""

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        """String representation."""
        return f"<TagModel(id={self.id}, name={self.name})>"

    def to_entity(self) -> Tag:
        """Convert to domain entity."""
        return Tag(id=self.id, name=self.name)


class PhotoModel(Base):
    """Uploaded product photo.

    Attributes:
        id: Photo identifier.
        product_id: Owning product.
        file: Stored file name.
        sort: Display position within the product gallery.
    """

    __tablename__ = "photos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    file: Mapped[str] = mapped_column(String(255), nullable=False)
    sort: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def to_entity(self) -> Photo:
        """Convert to domain entity."""
        return Photo(id=self.id, file=self.file)


class ProductModel(Base):
    """Product row.

    Attributes:
        id: Product identifier.
        category_id: Primary category.
        code: Merchant code (unique).
        name: Display name.
        description: Long description.
        price_new: Current price.
        price_old: Previous price, if any.
        main_photo_id: Primary photo, if any.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("categories.id"),
        nullable=False,
        index=True,
    )
    code: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price_new: Mapped[int] = mapped_column(Integer, nullable=False)
    price_old: Mapped[int | None] = mapped_column(Integer, nullable=True)
    main_photo_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("photos.id", ondelete="SET NULL", use_alter=True),
        nullable=True,
    )

    # Relationships
    category: Mapped[CategoryModel] = relationship(CategoryModel, lazy="raise")
    categories: Mapped[list[CategoryModel]] = relationship(
        CategoryModel,
        secondary=product_categories,
        order_by=CategoryModel.id,
        lazy="raise",
    )
    tags: Mapped[list[TagModel]] = relationship(
        TagModel,
        secondary=product_tags,
        order_by=TagModel.id,
        lazy="raise",
    )
    main_photo: Mapped[PhotoModel | None] = relationship(
        PhotoModel,
        foreign_keys=[main_photo_id],
        post_update=True,
        lazy="raise",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductModel(id={self.id}, code={self.code}, name={self.name[:30]}...)>"

    def to_entity(self) -> Product:
        """Convert to domain entity.

        Relationships must have been eagerly loaded.

        Returns:
            Product snapshot.
        """
        return Product(
            id=self.id,
            code=self.code,
            name=self.name,
            description=self.description,
            category=self.category.to_entity(),
            categories=tuple(c.to_entity() for c in self.categories),
            tags=tuple(t.to_entity() for t in self.tags),
            price=Price(new=self.price_new, old=self.price_old),
            main_photo=self.main_photo.to_entity() if self.main_photo else None,
        )
