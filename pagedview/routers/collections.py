from collections.abc import Sequence
from typing import Any

from fastapi import APIRouter, Depends, Query, Request

from pagedview.core.config import get_settings
from pagedview.core.logging import get_logger
from pagedview.core.pagination import paginate, parse_offset
from pagedview.deps import get_collection_items
from pagedview.models.page import Page
from pagedview.services import catalog
from pagedview.services.paginated_list import PaginatedList
from pagedview.sources.sequence import SequenceQuery

router = APIRouter()
log = get_logger(__name__)


@router.get("")
async def collections_list():
    """Names of the registered collections."""
    return {"items": catalog.list_collections()}


@router.get("/{name}/items", response_model=Page[Any])
async def collection_items(
    request: Request,
    name: str,
    items: Sequence[Any] = Depends(get_collection_items),
    length: int | None = Query(None, ge=0, description="Page length; 0 disables paging"),
    max_pages: int | None = Query(None, ge=1, description="Cap on the page list"),
    context: int | None = Query(None, ge=0, description="Pages around the current one in the summary"),
):
    """One page of a collection plus its navigation state and links.

    The offset is read from the configured pagination parameter (default `start`).
    """
    settings = get_settings()
    get_var = settings.pagination_get_var
    limit, start = paginate(
        settings.default_page_length if length is None else length,
        parse_offset(request.query_params.get(get_var)),
        max_limit=settings.max_page_length,
    )

    # rows are sliced here, so the view only does the arithmetic
    query = SequenceQuery(items, limit=limit, start=start)
    view = PaginatedList(query.execute(), request, page_length=limit, get_var=get_var)
    view.set_pagination_from_query(query)
    view.set_limit_items(False)

    meta = view.to_meta(
        max_pages=max_pages,
        context=settings.summary_context if context is None else context,
    )
    log.info("collection_page", name=name, current_page=meta.current_page, total_pages=meta.total_pages)
    return Page[Any](items=view.to_list(), pagination=meta)
