from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload, sessionmaker

from app.models.category import Category
from app.models.listing import Listing, ListingStatus
from app.services.listing_query import LIKE_ESCAPE, contains_pattern


class SearchStoreError(Exception):
    pass


class ListingStore:
    """
    Read-only access to listings and categories.

    Every call opens its own session, so fetch and count may run on separate
    threads at the same time. Database errors surface as SearchStoreError.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @contextmanager
    def _session(self):
        db: Session = self._session_factory()
        try:
            yield db
        except SQLAlchemyError as exc:
            raise SearchStoreError(f"listing store unavailable: {exc}") from exc
        finally:
            db.close()

    # ---------------------------
    # categories
    # ---------------------------
    def find_category_by_name(self, name: str) -> Optional[Category]:
        # exact (case-insensitive) name wins over a partial match
        with self._session() as db:
            category = (
                db.query(Category)
                .filter(func.lower(Category.name) == name.lower())
                .first()
            )
            if category is None:
                category = (
                    db.query(Category)
                    .filter(Category.name.ilike(contains_pattern(name), escape=LIKE_ESCAPE))
                    .order_by(Category.name.asc(), Category.id.asc())
                    .first()
                )
            return category

    def list_categories(self) -> List[Category]:
        with self._session() as db:
            return db.query(Category).order_by(Category.name.asc()).all()

    # ---------------------------
    # listings
    # ---------------------------
    def find_listings(self, criterion, order_by, skip: int, limit: int) -> List[Listing]:
        with self._session() as db:
            return (
                db.query(Listing)
                .options(selectinload(Listing.category))
                .options(selectinload(Listing.owner))
                .options(selectinload(Listing.photos))
                .filter(criterion)
                .order_by(*order_by)
                .offset(skip)
                .limit(limit)
                .all()
            )

    def count_listings(self, criterion) -> int:
        with self._session() as db:
            return db.query(Listing).filter(criterion).count()

    def get_active_listing(self, listing_id: int) -> Optional[Listing]:
        with self._session() as db:
            return (
                db.query(Listing)
                .options(selectinload(Listing.category))
                .options(selectinload(Listing.owner))
                .options(selectinload(Listing.photos))
                .filter(
                    Listing.id == listing_id,
                    Listing.status == ListingStatus.ACTIVE.value,
                )
                .first()
            )
