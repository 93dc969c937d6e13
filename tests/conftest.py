import os
from collections import Counter
from datetime import datetime, timedelta

# keep the module-level engine away from any real database
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.core.database import Base, build_engine
from app.main import app
from app.models.category import Category
from app.models.listing import Listing, ListingStatus
from app.models.listing_photo import ListingPhoto
from app.models.user import User
from app.routers.listings import get_listing_store
from app.services.listing_store import ListingStore


BASE_TIME = datetime(2024, 9, 1, 12, 0, 0)

# (title, description, price, category)
CATALOG = [
    ("Intro to Psychology Textbook", "Myers Psychology 12th edition, clean pages.", 25, "Books"),
    ("USB-C Charger", "65W wall charger with a 2 meter cable.", 35, "Electronics"),
    ("Calculus Textbook", "Stewart Calculus 8th Edition with some highlighting.", 45, "Books"),
    ("Desk Lamp", "LED desk lamp with three brightness levels.", 75, "Furniture"),
    ("Organic Chemistry Textbook", "Klein Organic Chemistry with solutions manual.", 80, "Books"),
    ("Physics Textbook Bundle", "Halliday Physics plus the study guide.", 120, "Books"),
    ("Office Chair", "Ergonomic office chair, adjustable height.", 150, "Furniture"),
    ("iPad Air", "iPad Air 4th gen, 64GB, includes case.", 200, "Electronics"),
    ("Standing Desk", "Electric standing desk, 48 inch top.", 300, "Furniture"),
    ("Futon Couch", "Folding futon, seats three, dark grey.", 400, "Furniture"),
    ("iPhone 13", "Unlocked iPhone 13, 128GB, battery health 90%.", 600, "Electronics"),
    ('MacBook Pro 13"', "Excellent condition laptop, barely used. Perfect for students.", 1200, "Electronics"),
]

SOLD_CATALOG = [
    ("Sold Statistics Textbook", "Already sold, must never show up in search.", 100, "Books"),
    ("Sold MacBook Air", "Already sold laptop.", 700, "Electronics"),
]

CATEGORY_NAMES = ["Books", "Electronics", "Furniture"]


class CountingStore:
    """Wraps a ListingStore and counts calls per method."""

    def __init__(self, inner):
        self.inner = inner
        self.calls = Counter()

    def __getattr__(self, name):
        attr = getattr(self.inner, name)
        if not callable(attr):
            return attr

        def wrapper(*args, **kwargs):
            self.calls[name] += 1
            return attr(*args, **kwargs)

        return wrapper


@pytest.fixture
def session_factory(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'search.db'}")
    Base.metadata.create_all(bind=engine)
    try:
        yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    finally:
        engine.dispose()


@pytest.fixture
def seeded(session_factory):
    """12 ACTIVE listings across 3 categories plus 2 SOLD ones. Returns ids by name."""
    with session_factory() as db:
        categories = {}
        for name in CATEGORY_NAMES:
            categories[name] = Category(name=name, description=f"{name} on campus")
            db.add(categories[name])
        seller = User(name="John Smith", email="john.smith@university.edu")
        other = User(name="Sarah Johnson", email="sarah.johnson@university.edu")
        db.add_all([seller, other])
        db.flush()

        rows = [(item, ListingStatus.ACTIVE) for item in CATALOG]
        rows += [(item, ListingStatus.SOLD) for item in SOLD_CATALOG]
        for idx, ((title, description, price, category), status) in enumerate(rows):
            listing = Listing(
                listing_id=f"LST-20240901-{idx:04d}",
                title=title,
                description=description,
                price=price,
                status=status,
                category_id=categories[category].id,
                user_id=(seller if idx % 2 == 0 else other).id,
                created_at=BASE_TIME + timedelta(minutes=idx),
            )
            listing.photos.append(ListingPhoto(url=f"https://example.com/{idx}.jpg", alt=title))
            db.add(listing)
        db.commit()
        return {name: c.id for name, c in categories.items()}


@pytest.fixture
def store(session_factory):
    return CountingStore(ListingStore(session_factory))


@pytest.fixture
def client(store):
    app.dependency_overrides[get_listing_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
