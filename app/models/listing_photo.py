from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from app.core.database import Base


class ListingPhoto(Base):
    __tablename__ = "listing_photos"

    id = Column(Integer, primary_key=True, index=True)
    listing_id = Column(Integer, ForeignKey("listings.id", ondelete="CASCADE"), index=True, nullable=False)

    url = Column(String(500), nullable=False)
    alt = Column(String(255), nullable=False, default="")
    sort_order = Column(Integer, nullable=False, default=0)  # 0 = primary photo

    listing = relationship("Listing", back_populates="photos")
