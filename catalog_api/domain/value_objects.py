"""Value Objects for the domain layer.

Value objects are immutable objects that are defined by their attributes
rather than identity.
"""

from dataclasses import dataclass

from catalog_api.domain.base import ValueObject
from catalog_api.domain.exceptions import InvalidPriceError


@dataclass(frozen=True)
class Price(ValueObject):
    """Current and previous price of a product.

    Amounts are integers in the smallest currency unit. The old price
    is optional; a product that was never discounted has none.
    """

    new: int
    old: int | None = None

    def __post_init__(self) -> None:
        """Validate price amounts."""
        if self.new < 0:
            raise InvalidPriceError("new", self.new)
        if self.old is not None and self.old < 0:
            raise InvalidPriceError("old", self.old)

    @property
    def is_discounted(self) -> bool:
        """Check if the current price is below the previous one."""
        return self.old is not None and self.new < self.old
