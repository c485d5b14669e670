"""Base classes for domain layer.

Provides foundational abstractions for entities and value objects.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar


# ============================================================================
# Value Object Base
# ============================================================================


@dataclass(frozen=True)
class ValueObject(ABC):
    """Base class for value objects.

    Value objects are immutable and compared by their attributes,
    not by identity.

    Example:
        @dataclass(frozen=True)
        class Price(ValueObject):
            new: int
            old: int | None
    """

    pass


# ============================================================================
# Entity Base
# ============================================================================


T = TypeVar("T", int, str)


@dataclass(frozen=True, eq=False)
class Entity(ABC, Generic[T]):
    """Base class for read-model entities.

    Entities have identity. Two entities are equal if they have the
    same identity, regardless of their other attributes. Catalog
    entities are read-only snapshots, hence frozen.

    Attributes:
        id: Unique identifier for this entity.
    """

    id: T

    def __eq__(self, other: object) -> bool:
        """Compare entities by identity.

        Args:
            other: Object to compare with.

        Returns:
            True if other is same type with same id.
        """
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash entity by identity.

        Returns:
            Hash of the entity id.
        """
        return hash(self.id)
