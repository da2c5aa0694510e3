"""Shared FastAPI dependencies."""

from collections.abc import Sequence
from typing import Any

from pagedview.core.exceptions import NotFoundError
from pagedview.services import catalog


async def get_collection_items(name: str) -> Sequence[Any]:
    """Dependency: resolve the `name` path parameter to a registered collection."""
    items = catalog.get_collection(name)
    if items is None:
        raise NotFoundError("Collection not found", details={"name": name})
    return items
