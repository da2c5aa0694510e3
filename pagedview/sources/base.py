from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class ItemSource(ABC, Generic[T]):
    """Ordered collection a paginated view reads from. Never mutated by the view."""

    @abstractmethod
    def count(self) -> int:
        """Number of items in the whole collection."""
        ...

    @abstractmethod
    def limit(self, length: int, start: int = 0) -> Iterator[T]:
        """Lazy iterator over at most `length` items beginning at offset `start`."""
        ...

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Lazy iterator over the whole collection."""
        ...


class LimitedQuery(ABC):
    """An executed (or executable) query that carries its own limit and unlimited count."""

    @abstractmethod
    def get_limit(self) -> dict[str, int] | None:
        """{"limit": ..., "start": ...}, or None when the query is unlimited."""
        ...

    @abstractmethod
    def unlimited_row_count(self) -> int:
        """Row count the query would produce without its limit."""
        ...
