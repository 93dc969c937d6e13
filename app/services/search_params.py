import math
from dataclasses import dataclass
from typing import Mapping, Optional


SORT_CREATED_DESC = "createdAt_desc"
SORT_CREATED_ASC = "createdAt_asc"
SORT_PRICE_ASC = "price_asc"
SORT_PRICE_DESC = "price_desc"

SORT_KEYS = (SORT_CREATED_DESC, SORT_CREATED_ASC, SORT_PRICE_ASC, SORT_PRICE_DESC)
DEFAULT_SORT = SORT_CREATED_DESC

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
MAX_QUERY_LENGTH = 100
# keeps OFFSET well inside a 64-bit integer with capped page sizes
MAX_PAGE_NUMBER = 1_000_000


@dataclass(frozen=True)
class SearchParams:
    q: str = ""
    category: str = ""
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    sort: str = DEFAULT_SORT
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE


def _parse_price(raw) -> Optional[float]:
    if raw is None:
        return None
    raw = str(raw).strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def _parse_positive_int(raw, default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if value >= 1 else default


def normalize_search_params(
    raw: Mapping[str, Optional[str]],
    *,
    default_page_size: int = DEFAULT_PAGE_SIZE,
    max_page_size: int = MAX_PAGE_SIZE,
    max_query_length: int = MAX_QUERY_LENGTH,
) -> SearchParams:
    """
    Turn raw query-string values into a typed SearchParams.

    Never raises for malformed values: bad numbers fall back to "unset" (prices)
    or to the default (page, pageSize), unknown sort keys to createdAt_desc.
    Over-long queries are truncated and oversized pages lowered to max_page_size.
    """
    q = (raw.get("q") or "").strip()[:max_query_length].strip()

    sort = raw.get("sort") or DEFAULT_SORT
    if sort not in SORT_KEYS:
        sort = DEFAULT_SORT

    page_size = min(_parse_positive_int(raw.get("pageSize"), default_page_size), max_page_size)

    return SearchParams(
        q=q,
        category=raw.get("category") or "",
        min_price=_parse_price(raw.get("minPrice")),
        max_price=_parse_price(raw.get("maxPrice")),
        sort=sort,
        page=min(_parse_positive_int(raw.get("page"), 1), MAX_PAGE_NUMBER),
        page_size=page_size,
    )
