"""Paginated view over an ordered collection.

Holds offset, page length and total count; derives page numbers and item
boundaries; yields the current page lazily; builds page lists, elided
summaries and navigation links from the request's query parameters.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Generic, TypeVar

from starlette.datastructures import URL, ImmutableMultiDict, QueryParams
from starlette.requests import HTTPConnection

from pagedview.core.logging import get_logger
from pagedview.core.pagination import Disabled, Enabled, PagingMode, paging_mode, parse_offset
from pagedview.models.page import PageDescriptor, PaginationMeta
from pagedview.sources.base import ItemSource, LimitedQuery
from pagedview.sources.sequence import as_source

T = TypeVar("T")

DEFAULT_PAGE_LENGTH = 10
DEFAULT_GET_VAR = "start"

log = get_logger(__name__)

RequestSource = HTTPConnection | URL | str | Mapping[str, Any] | None


def _query_params(params: Mapping[str, Any]) -> QueryParams:
    """Parameter map as QueryParams, keeping repeated keys (multi-dicts, list values)."""
    if isinstance(params, ImmutableMultiDict):
        return QueryParams(params.multi_items())
    pairs = []
    for key, value in params.items():
        values = value if isinstance(value, (list, tuple)) else [value]
        pairs.extend((key, v) for v in values)
    return QueryParams(pairs)


def _request_url(request: RequestSource) -> URL:
    # HTTPConnection is itself a Mapping (over the ASGI scope), so test it first
    if request is None:
        return URL()
    if isinstance(request, HTTPConnection):
        return request.url
    if isinstance(request, URL):
        return request
    if isinstance(request, str):
        return URL(request)
    if isinstance(request, Mapping):
        return URL(query=str(_query_params(request)))
    raise TypeError(f"Unsupported request source: {type(request).__name__}")


class PaginatedList(Generic[T]):
    def __init__(
        self,
        items: ItemSource[T] | Iterable[T],
        request: RequestSource = None,
        page_length: int = DEFAULT_PAGE_LENGTH,
        get_var: str = DEFAULT_GET_VAR,
    ) -> None:
        self.source = as_source(items)
        self._mode: PagingMode = paging_mode(page_length)
        self._get_var = get_var
        self._page_start: int | None = None
        self._total_items: int | None = None
        self._limit_items = True
        self._url = _request_url(request)

    # -- request / parameter source

    def get_request(self) -> URL:
        return self._url

    def set_request(self, request: RequestSource) -> "PaginatedList[T]":
        self._url = _request_url(request)
        return self

    @property
    def query_params(self) -> QueryParams:
        return QueryParams(self._url.query)

    def get_pagination_get_var(self) -> str:
        return self._get_var

    def set_pagination_get_var(self, var: str) -> "PaginatedList[T]":
        self._get_var = var
        return self

    # -- core fields

    @property
    def paging(self) -> PagingMode:
        return self._mode

    def get_page_length(self) -> int:
        if isinstance(self._mode, Enabled):
            return self._mode.size
        return 0

    def set_page_length(self, length: int) -> "PaginatedList[T]":
        self._mode = paging_mode(length)
        return self

    def get_page_start(self) -> int:
        """Explicit offset if one was set, otherwise the request's offset parameter."""
        if self._page_start is not None:
            return self._page_start
        return parse_offset(self.query_params.get(self._get_var))

    def set_page_start(self, start: int) -> "PaginatedList[T]":
        self._page_start = max(0, start)
        return self

    def get_total_items(self) -> int:
        if self._total_items is None:
            self._total_items = self.source.count()
            log.debug("total_items_measured", total_items=self._total_items)
        return self._total_items

    def set_total_items(self, total: int) -> "PaginatedList[T]":
        self._total_items = max(0, total)
        return self

    def get_limit_items(self) -> bool:
        return self._limit_items

    def set_limit_items(self, limit_items: bool) -> "PaginatedList[T]":
        """When False, iteration returns the whole source; page arithmetic is unaffected."""
        self._limit_items = limit_items
        return self

    def set_current_page(self, page: int) -> "PaginatedList[T]":
        if isinstance(self._mode, Enabled):
            self.set_page_start((page - 1) * self._mode.size)
        return self

    def set_pagination(self, limit: int, start: int, unlimited_count: int) -> "PaginatedList[T]":
        """Copy limit, offset and total from an already executed query."""
        self.set_page_length(limit)
        self.set_page_start(start)
        self.set_total_items(unlimited_count)
        return self

    def set_pagination_from_query(self, query: LimitedQuery) -> "PaginatedList[T]":
        limit = query.get_limit()
        if not limit:
            return self
        self.set_pagination(limit["limit"], limit["start"], query.unlimited_row_count())
        log.debug(
            "pagination_from_query",
            limit=self.get_page_length(),
            start=self.get_page_start(),
            total_items=self.get_total_items(),
        )
        return self

    # -- derived state

    def current_page(self) -> int:
        if isinstance(self._mode, Disabled):
            return 1
        return self.get_page_start() // self._mode.size + 1

    def total_pages(self) -> int:
        total = self.get_total_items()
        if isinstance(self._mode, Disabled):
            return min(total, 1)
        return (total + self._mode.size - 1) // self._mode.size

    def more_than_one_page(self) -> bool:
        if isinstance(self._mode, Disabled):
            return False
        return self.get_total_items() > self._mode.size

    def first_page(self) -> bool:
        return self.current_page() == 1

    def not_first_page(self) -> bool:
        return not self.first_page()

    def last_page(self) -> bool:
        return self.current_page() >= self.total_pages()

    def not_last_page(self) -> bool:
        return not self.last_page()

    def first_item(self) -> int:
        """One-based index of the first item on this page."""
        if isinstance(self._mode, Disabled):
            return 1
        return self.get_page_start() + 1

    def last_item(self) -> int:
        """One-based index of the last item on this page."""
        if isinstance(self._mode, Disabled):
            return self.get_total_items()
        return min(self.get_page_start() + self._mode.size, self.get_total_items())

    # -- windows

    def iterate(self) -> Iterator[T]:
        if self._limit_items and isinstance(self._mode, Enabled):
            return self.source.limit(self._mode.size, self.get_page_start())
        return iter(self.source)

    def __iter__(self) -> Iterator[T]:
        return self.iterate()

    def to_list(self) -> list[T]:
        return list(self.iterate())

    def pages(self, max_pages: int | None = None) -> list[PageDescriptor]:
        """Descriptors for every page, or a window of `max_pages` centred on the current one."""
        current = self.current_page()
        if isinstance(self._mode, Disabled):
            return [self._page(1, current)]
        total = self.total_pages()
        if max_pages is None or max_pages >= total:
            start, end = 1, total
        elif max_pages <= 0:
            return []
        else:
            start = max(1, current - (max_pages - 1) // 2)
            end = min(total, start + max_pages - 1)
            # window ran past the last page: slide it back
            start = max(1, end - max_pages + 1)
        return [self._page(num, current) for num in range(start, end + 1)]

    def pagination_summary(self, context: int = 4) -> list[PageDescriptor]:
        """First page, last page and `context` pages around the current one, with ellipsis markers."""
        current = self.current_page()
        if isinstance(self._mode, Disabled):
            return [self._page(1, current)]
        context = max(0, context)
        total = self.total_pages()
        low = max(2, current - context // 2)
        high = min(total - 1, current + (context + 1) // 2)

        summary = [self._page(1, current)]
        if low > 2:
            summary.append(PageDescriptor())
        summary.extend(self._page(num, current) for num in range(low, high + 1))
        if high < total - 1:
            summary.append(PageDescriptor())
        if total > 1:
            summary.append(self._page(total, current))
        return summary

    def _page(self, num: int, current: int) -> PageDescriptor:
        return PageDescriptor(
            page_num=num,
            link=self._link((num - 1) * self.get_page_length()),
            current=num == current,
        )

    # -- links

    def _link(self, offset: int) -> str:
        # other parameters are kept by value; their percent-encoding may be normalized
        return str(self._url.include_query_params(**{self._get_var: offset}))

    def first_link(self) -> str:
        return self._link(0)

    def last_link(self) -> str:
        if isinstance(self._mode, Disabled):
            return self._link(0)
        return self._link(max(0, (self.total_pages() - 1) * self._mode.size))

    def next_link(self) -> str | None:
        if isinstance(self._mode, Disabled) or self.last_page():
            return None
        return self._link(self.get_page_start() + self._mode.size)

    def prev_link(self) -> str | None:
        if isinstance(self._mode, Disabled) or self.first_page():
            return None
        return self._link(max(0, self.get_page_start() - self._mode.size))

    def to_meta(self, max_pages: int | None = None, context: int = 4) -> PaginationMeta:
        return PaginationMeta(
            current_page=self.current_page(),
            total_pages=self.total_pages(),
            page_start=self.get_page_start(),
            page_length=self.get_page_length(),
            total_items=self.get_total_items(),
            first_item=self.first_item(),
            last_item=self.last_item(),
            more_than_one_page=self.more_than_one_page(),
            first_page=self.first_page(),
            last_page=self.last_page(),
            first_link=self.first_link(),
            last_link=self.last_link(),
            next_link=self.next_link(),
            prev_link=self.prev_link(),
            pages=self.pages(max_pages),
            summary=self.pagination_summary(context),
        )
