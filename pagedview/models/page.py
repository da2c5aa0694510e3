"""Response schemas for paginated views."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PageDescriptor(BaseModel):
    page_num: int | None = None  # None = ellipsis marker for an elided range
    link: str | None = None
    current: bool = False

    @property
    def is_ellipsis(self) -> bool:
        return self.page_num is None


class PaginationMeta(BaseModel):
    current_page: int
    total_pages: int
    page_start: int
    page_length: int
    total_items: int
    first_item: int
    last_item: int
    more_than_one_page: bool
    first_page: bool
    last_page: bool
    first_link: str
    last_link: str
    next_link: str | None = None
    prev_link: str | None = None
    pages: list[PageDescriptor] = Field(default_factory=list)
    summary: list[PageDescriptor] = Field(default_factory=list)


class Page(BaseModel, Generic[T]):
    items: list[T]
    pagination: PaginationMeta
