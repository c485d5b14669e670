"""Domain exceptions.

All domain-level errors raised by catalog entities, value objects and
the catalog service.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Lookup Errors
# ============================================================================


class EntityNotFoundError(DomainError):
    """Raised when an identifier does not resolve to an existing entity."""

    def __init__(self, entity_type: str, entity_id: Any) -> None:
        """Initialize entity not found error.

        Args:
            entity_type: Type of entity (e.g., "Product", "Category").
            entity_id: Identifier that failed to resolve.
        """
        super().__init__(
            f"{entity_type} not found: {entity_id}",
            details={"entity_type": entity_type, "entity_id": str(entity_id)},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


# ============================================================================
# Price Errors
# ============================================================================


class InvalidPriceError(DomainError):
    """Raised when a price amount is negative."""

    def __init__(self, field: str, amount: int) -> None:
        """Initialize invalid price error.

        Args:
            field: Which price was invalid ("new" or "old").
            amount: The offending amount.
        """
        super().__init__(
            f"Price '{field}' cannot be negative: {amount}",
            details={"field": field, "amount": amount},
        )
