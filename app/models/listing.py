import enum
import uuid
from datetime import datetime

from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    Numeric,
    DateTime,
    ForeignKey,
    Index,
)
from sqlalchemy.orm import relationship, validates

from app.core.database import Base


TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000


class ListingStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    SOLD = "SOLD"


def generate_listing_code(now: datetime | None = None) -> str:
    """Display code shown to users, e.g. ``LST-20240131-3FA9C2E17B04``.

    48 random bits per day: a duplicate needs ~16 million listings created on
    the same date, and then surfaces as an IntegrityError on insert.
    """
    now = now or datetime.utcnow()
    return f"LST-{now:%Y%m%d}-{uuid.uuid4().hex[:12].upper()}"


class Listing(Base):
    __tablename__ = "listings"
    __table_args__ = (
        Index("ix_listings_category_price", "category_id", "price"),
        Index("ix_listings_status_created", "status", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    listing_id = Column(String(32), unique=True, nullable=False, default=generate_listing_code)

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)

    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    description = Column(Text, nullable=False)

    price = Column(Numeric(10, 2), nullable=False, default=0)

    status = Column(String(10), nullable=False, default=ListingStatus.ACTIVE.value)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
    )

    owner = relationship("User", back_populates="listings")
    category = relationship("Category", back_populates="listings")

    # first photo is the primary one by convention
    photos = relationship(
        "ListingPhoto",
        back_populates="listing",
        cascade="all, delete-orphan",
        order_by="ListingPhoto.sort_order",
    )

    @validates("title", "description")
    def _validate_text(self, key, value):
        limit = TITLE_MAX_LENGTH if key == "title" else DESCRIPTION_MAX_LENGTH
        value = (value or "").strip()
        if not value:
            raise ValueError(f"{key} is required")
        if len(value) > limit:
            raise ValueError(f"{key} must be at most {limit} characters")
        return value

    @validates("price")
    def _validate_price(self, key, value):
        if value is None or value < 0:
            raise ValueError("price must be a non-negative number")
        return value

    @validates("status")
    def _validate_status(self, key, value):
        return ListingStatus(value).value

    @property
    def is_active(self) -> bool:
        return self.status == ListingStatus.ACTIVE.value

    def mark_sold(self) -> None:
        self.status = ListingStatus.SOLD.value

    def reactivate(self) -> None:
        # administrative override, not part of the normal lifecycle
        self.status = ListingStatus.ACTIVE.value
