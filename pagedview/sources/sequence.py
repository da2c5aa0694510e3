from collections.abc import Iterable, Iterator, Sequence, Sized
from itertools import islice
from typing import Any, TypeVar

from pagedview.sources.base import ItemSource, LimitedQuery

T = TypeVar("T")


class SequenceSource(ItemSource[T]):
    """In-memory source over a sequence or any re-iterable collection."""

    def __init__(self, items: Iterable[T]) -> None:
        self.items = items

    def count(self) -> int:
        if isinstance(self.items, Sized):
            return len(self.items)
        return sum(1 for _ in self.items)

    def limit(self, length: int, start: int = 0) -> Iterator[T]:
        start = max(0, start)
        length = max(0, length)
        if isinstance(self.items, Sequence):
            stop = min(start + length, len(self.items))
            return (self.items[i] for i in range(start, stop))
        return islice(self.items, start, start + length)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)


def as_source(items: ItemSource[T] | Iterable[T]) -> ItemSource[T]:
    """Wrap plain collections; pass sources through untouched."""
    if isinstance(items, ItemSource):
        return items
    return SequenceSource(items)


class SequenceQuery(LimitedQuery):
    """Limit/offset query over an in-memory sequence. limit=0 means unlimited."""

    def __init__(self, items: Sequence[Any], limit: int = 0, start: int = 0) -> None:
        self.items = items
        self.limit = max(0, limit)
        self.start = max(0, start)

    def get_limit(self) -> dict[str, int] | None:
        if not self.limit:
            return None
        return {"limit": self.limit, "start": self.start}

    def unlimited_row_count(self) -> int:
        return len(self.items)

    def execute(self) -> list[Any]:
        """Rows inside the limit window."""
        if not self.limit:
            return list(self.items)
        return list(self.items[self.start:self.start + self.limit])
