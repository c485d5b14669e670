"""Pagination, sorting and data providers for collection endpoints.

A data provider is one page of models together with the pagination
and sort state that produced it. ``MapDataProvider`` wraps another
provider and transforms its models lazily, leaving the pagination
metadata untouched.
"""

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")

DEFAULT_PAGE_SIZE = 20
PAGE_SIZE_LIMIT = (1, 50)


# ============================================================================
# Pagination
# ============================================================================


@dataclass
class Pagination:
    """Pagination state for a collection request.

    The requested page is 1-based. Once ``total_count`` is known the
    page is clamped into ``[1, page_count]``, so asking for a page
    beyond the last one returns the last page.

    Attributes:
        page: Requested page number (1-indexed).
        page_size: Requested items per page.
        total_count: Total number of items across all pages.
        page_size_limit: Inclusive (min, max) bounds for page_size.
    """

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total_count: int = 0
    page_size_limit: tuple[int, int] = PAGE_SIZE_LIMIT

    def __post_init__(self) -> None:
        low, high = self.page_size_limit
        self.page_size = min(max(self.page_size, low), high)
        self.page = max(self.page, 1)

    @property
    def page_count(self) -> int:
        """Calculate total pages."""
        return (self.total_count + self.page_size - 1) // self.page_size

    @property
    def current_page(self) -> int:
        """Get the requested page clamped to the available range."""
        return min(self.page, max(self.page_count, 1))

    @property
    def offset(self) -> int:
        """Calculate offset from the current page."""
        return (self.current_page - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Get limit (alias for page_size)."""
        return self.page_size

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.current_page < self.page_count

    @property
    def has_prev(self) -> bool:
        """Check if there's a previous page."""
        return self.current_page > 1


# ============================================================================
# Sorting
# ============================================================================


SORTABLE_FIELDS = ("id", "name", "price")


@dataclass(frozen=True)
class Sort:
    """Sort order for a collection request.

    Serialized as ``field`` for ascending or ``-field`` for descending.
    """

    field: str = "id"
    descending: bool = True

    @classmethod
    def parse(
        cls,
        value: str | None,
        allowed: Sequence[str] = SORTABLE_FIELDS,
        default: str = "-id",
    ) -> "Sort":
        """Parse a sort query parameter.

        Unknown fields fall back to the default order.

        Args:
            value: Raw parameter such as "price" or "-name".
            allowed: Sortable field names.
            default: Order used when value is missing or invalid.

        Returns:
            Sort instance.
        """
        raw = (value or "").strip() or default
        descending = raw.startswith("-")
        name = raw.lstrip("-")
        if name not in allowed:
            if raw == default:
                raise ValueError(f"Default sort field not allowed: {default}")
            return cls.parse(default, allowed, default)
        return cls(field=name, descending=descending)

    def __str__(self) -> str:
        """Return the query parameter representation."""
        return f"-{self.field}" if self.descending else self.field


# ============================================================================
# Data Providers
# ============================================================================


@dataclass
class DataProvider(Generic[T]):
    """A single page of models with its pagination metadata.

    Attributes:
        models: Models on the current page.
        pagination: Pagination state (total_count filled in).
        sort: Sort order the models were fetched with.
        key: Function extracting a model's key.
    """

    models: Sequence[T]
    pagination: Pagination
    sort: Sort = field(default_factory=Sort)
    key: Callable[[T], Any] = field(default=lambda model: getattr(model, "id"))

    @property
    def total_count(self) -> int:
        """Get total count across all pages."""
        return self.pagination.total_count

    @property
    def count(self) -> int:
        """Get number of models on the current page."""
        return len(self.models)

    @property
    def keys(self) -> list[Any]:
        """Get keys of the models on the current page."""
        return [self.key(model) for model in self.models]

    def __iter__(self) -> Iterator[T]:
        return iter(self.models)


class MapDataProvider(Generic[T, R]):
    """Data provider that maps another provider's models through a callback.

    The callback is applied lazily, one model at a time, while iterating.
    Pagination, sort, counts and keys come from the wrapped provider.

    Example usage:
        provider = repository_result  # DataProvider[Product]
        items = MapDataProvider(provider, serialize_list_item)
        for item in items:
            ...
    """

    def __init__(self, source: DataProvider[T], callback: Callable[[T], R]) -> None:
        """Initialize the adapter.

        Args:
            source: Wrapped data provider.
            callback: Transform applied to each model.
        """
        self.source = source
        self.callback = callback

    @property
    def models(self) -> Iterator[R]:
        """Get a lazy iterator of transformed models."""
        return map(self.callback, self.source.models)

    @property
    def pagination(self) -> Pagination:
        return self.source.pagination

    @property
    def sort(self) -> Sort:
        return self.source.sort

    @property
    def total_count(self) -> int:
        return self.source.total_count

    @property
    def count(self) -> int:
        return self.source.count

    @property
    def keys(self) -> list[Any]:
        return self.source.keys

    def __iter__(self) -> Iterator[R]:
        for model in self.source.models:
            yield self.callback(model)
