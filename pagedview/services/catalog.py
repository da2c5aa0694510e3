"""Named collections served by the API (process-local, in memory)."""

from collections.abc import Sequence
from typing import Any

from pagedview.core.logging import get_logger

log = get_logger(__name__)

_collections: dict[str, Sequence[Any]] = {}


def register_collection(name: str, items: Sequence[Any]) -> None:
    """Register (or replace) a collection. The sequence is stored as-is, not copied."""
    _collections[name] = items
    log.info("collection_registered", name=name)


def get_collection(name: str) -> Sequence[Any] | None:
    return _collections.get(name)


def list_collections() -> list[str]:
    return sorted(_collections)


def clear_collections() -> None:
    _collections.clear()
