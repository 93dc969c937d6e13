from sqlalchemy import Column, Integer, String

from sqlalchemy.orm import relationship

from app.core.database import Base


class User(Base):
    # owned by the auth service; only the columns search exposes are mapped here
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False, default="")
    email = Column(String, unique=True, index=True, nullable=False)

    listings = relationship("Listing", back_populates="owner")
