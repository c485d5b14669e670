"""Domain layer.

Catalog entities, value objects and domain exceptions.
"""

from catalog_api.domain.entities import Category, Photo, Product, Tag
from catalog_api.domain.exceptions import DomainError, EntityNotFoundError, InvalidPriceError
from catalog_api.domain.value_objects import Price

__all__ = [
    # Entities
    "Category",
    "Photo",
    "Product",
    "Tag",
    # Value objects
    "Price",
    # Exceptions
    "DomainError",
    "EntityNotFoundError",
    "InvalidPriceError",
]
