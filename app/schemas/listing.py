from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.category import CategorySummary
from app.schemas.user import UserSummary


class ListingPhotoSchema(BaseModel):
    url: str
    alt: str = ""

    model_config = ConfigDict(from_attributes=True)


class ListingRead(BaseModel):
    # category/owner relationships are rendered under the FK names clients expect
    id: int
    listing_id: str = Field(alias="listingId")
    title: str
    description: str
    price: float
    status: str
    photos: List[ListingPhotoSchema] = []
    category: CategorySummary = Field(alias="categoryId")
    owner: UserSummary = Field(alias="userId")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class PageInfo(BaseModel):
    current: int
    page_size: int = Field(alias="pageSize")
    total: int
    total_pages: int = Field(alias="totalPages")

    model_config = ConfigDict(populate_by_name=True)


class SearchResponse(BaseModel):
    items: List[ListingRead] = []
    page: PageInfo
