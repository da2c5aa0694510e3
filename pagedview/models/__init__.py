from pagedview.models.page import Page, PageDescriptor, PaginationMeta

__all__ = [
    "Page",
    "PageDescriptor",
    "PaginationMeta",
]
