from typing import List, Optional

from sqlalchemy import and_, or_

from app.models.listing import Listing, ListingStatus
from app.services.search_params import (
    SearchParams,
    SORT_CREATED_ASC,
    SORT_CREATED_DESC,
    SORT_PRICE_ASC,
    SORT_PRICE_DESC,
)

LIKE_ESCAPE = "\\"

# sort key -> (column, descending?)
SORT_STRATEGIES = {
    SORT_CREATED_DESC: (Listing.created_at, True),
    SORT_CREATED_ASC: (Listing.created_at, False),
    SORT_PRICE_ASC: (Listing.price, False),
    SORT_PRICE_DESC: (Listing.price, True),
}


def escape_like(term: str) -> str:
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_pattern(term: str) -> str:
    return f"%{escape_like(term)}%"


def text_match(q: str):
    """Every whitespace separated term must appear in the title or the description."""
    clauses = []
    for term in q.split():
        pattern = contains_pattern(term)
        clauses.append(
            or_(
                Listing.title.ilike(pattern, escape=LIKE_ESCAPE),
                Listing.description.ilike(pattern, escape=LIKE_ESCAPE),
            )
        )
    return and_(*clauses)


def compile_listing_filter(params: SearchParams, category_id: Optional[int] = None):
    # public search only ever sees ACTIVE listings; no parameter can lift this
    clauses = [Listing.status == ListingStatus.ACTIVE.value]

    if params.q:
        clauses.append(text_match(params.q))
    if category_id is not None:
        clauses.append(Listing.category_id == category_id)
    if params.min_price is not None:
        clauses.append(Listing.price >= params.min_price)
    if params.max_price is not None:
        clauses.append(Listing.price <= params.max_price)

    return and_(*clauses)


def listing_order_by(sort: str) -> List:
    column, descending = SORT_STRATEGIES.get(sort, SORT_STRATEGIES[SORT_CREATED_DESC])
    # id tie-break keeps page boundaries stable when prices/timestamps repeat
    return [column.desc() if descending else column.asc(), Listing.id.asc()]
