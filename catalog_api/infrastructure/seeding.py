"""Persist a generated catalog into the database.

Used by ``scripts/seed_catalog.py`` and the database repository tests.
"""

from typing import Any

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.catalog.generator import GeneratedCatalog
from catalog_api.infrastructure.models import (
    CategoryModel,
    PhotoModel,
    ProductModel,
    TagModel,
    product_categories,
    product_tags,
)


async def clear_catalog(session: AsyncSession) -> None:
    """Delete all catalog rows.

    Args:
        session: Async SQLAlchemy session.
    """
    await session.execute(delete(product_tags))
    await session.execute(delete(product_categories))
    await session.execute(update(ProductModel).values(main_photo_id=None))
    await session.execute(delete(PhotoModel))
    await session.execute(delete(ProductModel))
    await session.execute(delete(TagModel))
    await session.execute(delete(CategoryModel))
    await session.flush()


async def save_catalog(
    session: AsyncSession,
    catalog: GeneratedCatalog,
    clear_existing: bool = True,
) -> dict[str, Any]:
    """Save categories, tags, products and photos.

    Rows are flushed in dependency order; main photos are linked last
    because products and photos reference each other.

    Args:
        session: Async SQLAlchemy session.
        catalog: Generated catalog.
        clear_existing: Whether to delete existing rows first.

    Returns:
        Seeding result with counts.
    """
    if clear_existing:
        await clear_catalog(session)

    categories = {c.id: CategoryModel(id=c.id, name=c.name) for c in catalog.categories}
    tags = {t.id: TagModel(id=t.id, name=t.name) for t in catalog.tags}
    for product in catalog.products:
        for category in product.all_categories:
            categories.setdefault(category.id, CategoryModel(id=category.id, name=category.name))
        for tag in product.tags:
            tags.setdefault(tag.id, TagModel(id=tag.id, name=tag.name))

    session.add_all([*categories.values(), *tags.values()])
    await session.flush()

    session.add_all(
        [
            ProductModel(
                id=product.id,
                category_id=product.category.id,
                code=product.code,
                name=product.name,
                description=product.description,
                price_new=product.price.new,
                price_old=product.price.old,
                categories=[categories[c.id] for c in product.categories],
                tags=[tags[t.id] for t in product.tags],
            )
            for product in catalog.products
        ]
    )
    await session.flush()

    photos = [
        PhotoModel(id=p.main_photo.id, product_id=p.id, file=p.main_photo.file, sort=0)
        for p in catalog.products
        if p.main_photo is not None
    ]
    session.add_all(photos)
    await session.flush()

    for product in catalog.products:
        if product.main_photo is not None:
            await session.execute(
                update(ProductModel)
                .where(ProductModel.id == product.id)
                .values(main_photo_id=product.main_photo.id)
            )
    await session.flush()

    return {
        "categories_created": len(categories),
        "tags_created": len(tags),
        "products_created": len(catalog.products),
        "photos_created": len(photos),
    }
