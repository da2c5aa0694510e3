"""Pagination primitives: paging mode, offset parsing and clamping."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class Enabled(BaseModel):
    """Paging on; each page holds `size` items."""

    model_config = ConfigDict(frozen=True)

    size: int


class Disabled(BaseModel):
    """Paging off; the whole collection is a single page."""

    model_config = ConfigDict(frozen=True)


PagingMode = Enabled | Disabled


def paging_mode(page_length: int) -> PagingMode:
    """Map a page length to its mode; 0 (or less) disables paging."""
    if page_length > 0:
        return Enabled(size=page_length)
    return Disabled()


def parse_offset(value: Any) -> int:
    """Parse an offset from a request value. Missing, non-numeric or negative values give 0."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        offset = int(str(value).strip())
    except ValueError:
        return 0
    return max(0, offset)


def paginate(limit: int, offset: int, max_limit: int = 200) -> tuple[int, int]:
    """Clamp limit/offset; return (limit, offset). A limit of 0 stays 0 (paging disabled)."""
    limit = max(0, min(limit, max_limit))
    offset = max(0, offset)
    return limit, offset
