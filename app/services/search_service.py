import asyncio
import logging
from typing import Mapping, Optional

from fastapi.concurrency import run_in_threadpool

from app.core.config import Settings, get_settings
from app.schemas.listing import ListingRead, SearchResponse
from app.services.category_resolver import CategoryById, CategoryNotFound, resolve_category
from app.services.listing_query import compile_listing_filter, listing_order_by
from app.services.listing_store import ListingStore
from app.services.pagination import Pagination
from app.services.search_params import normalize_search_params

logger = logging.getLogger(__name__)


async def search_listings(
    raw_params: Mapping[str, Optional[str]],
    store: ListingStore,
    settings: Optional[Settings] = None,
) -> SearchResponse:
    settings = settings or get_settings()
    params = normalize_search_params(
        raw_params,
        default_page_size=settings.search_default_page_size,
        max_page_size=settings.search_max_page_size,
        max_query_length=settings.search_max_query_length,
    )
    pagination = Pagination(page=params.page, page_size=params.page_size)
    logger.debug("listing search %s", params)

    # must finish before the main query: a miss means there is nothing to fetch
    category = await run_in_threadpool(resolve_category, params.category, store)
    if isinstance(category, CategoryNotFound):
        logger.info("category %r not found, returning empty result", category.token)
        return SearchResponse(items=[], page=pagination.page_info(0))

    category_id = category.category_id if isinstance(category, CategoryById) else None
    criterion = compile_listing_filter(params, category_id=category_id)
    order_by = listing_order_by(params.sort)

    rows, total = await asyncio.gather(
        run_in_threadpool(store.find_listings, criterion, order_by, pagination.skip, pagination.limit),
        run_in_threadpool(store.count_listings, criterion),
    )

    return SearchResponse(
        items=[ListingRead.model_validate(row) for row in rows],
        page=pagination.page_info(total),
    )
