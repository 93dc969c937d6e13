from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core.config import Settings, get_settings
from app.core.database import SessionLocal
from app.schemas.category import CategoryRead
from app.schemas.listing import ListingRead, SearchResponse
from app.services.listing_store import ListingStore
from app.services.search_service import search_listings

router = APIRouter(prefix="/listings", tags=["listings"])

# listings.id is a signed 64-bit column at most
MAX_LISTING_ID = 2**63 - 1


def get_listing_store() -> ListingStore:
    return ListingStore(SessionLocal)


# Query values are taken as raw strings on purpose: malformed numbers and
# unknown sort keys are normalized by the search service instead of
# producing a 422.
@router.get("/search", response_model=SearchResponse)
async def search(
    q: Optional[str] = Query(None),
    category: Optional[str] = Query(None, description="Category id or name"),
    min_price: Optional[str] = Query(None, alias="minPrice"),
    max_price: Optional[str] = Query(None, alias="maxPrice"),
    sort: Optional[str] = Query(None, description="createdAt_desc | createdAt_asc | price_asc | price_desc"),
    page: Optional[str] = Query(None),
    page_size: Optional[str] = Query(None, alias="pageSize"),
    store: ListingStore = Depends(get_listing_store),
    settings: Settings = Depends(get_settings),
):
    raw = {
        "q": q,
        "category": category,
        "minPrice": min_price,
        "maxPrice": max_price,
        "sort": sort,
        "page": page,
        "pageSize": page_size,
    }
    return await search_listings(raw, store, settings)


@router.get("/categories", response_model=List[CategoryRead])
def list_categories(store: ListingStore = Depends(get_listing_store)):
    return [CategoryRead.model_validate(c) for c in store.list_categories()]


@router.get("/{listing_id}", response_model=ListingRead)
def get_listing(
    listing_id: int,
    store: ListingStore = Depends(get_listing_store),
):
    # SOLD listings are hidden exactly like missing ones
    listing = None
    if 0 < listing_id <= MAX_LISTING_ID:
        listing = store.get_active_listing(listing_id)
    if not listing:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Listing not found",
        )
    return ListingRead.model_validate(listing)
