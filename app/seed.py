"""
Populate a development database with campus users, categories and listings.

    python -m app.seed
"""
import logging

from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import Base, SessionLocal, engine
from app.core.logging_config import configure_logging
from app.models.category import Category
from app.models.listing import Listing, ListingStatus
from app.models.listing_photo import ListingPhoto
from app.models.user import User

logger = logging.getLogger(__name__)


USERS = [
    {"name": "John Smith", "email": "john.smith@university.edu"},
    {"name": "Sarah Johnson", "email": "sarah.johnson@university.edu"},
    {"name": "Mike Chen", "email": "mike.chen@university.edu"},
    {"name": "Emily Davis", "email": "emily.davis@university.edu"},
]

CATEGORIES = [
    {"name": "Books", "description": "Textbooks, novels, and educational materials"},
    {"name": "Electronics", "description": "Laptops, phones, gadgets, and accessories"},
    {"name": "Furniture", "description": "Desks, chairs, and room furniture"},
    {"name": "Clothing", "description": "Clothes, shoes, and accessories"},
    {"name": "Sports & Recreation", "description": "Sports equipment and recreational items"},
    {"name": "Home & Kitchen", "description": "Kitchen appliances and home items"},
    {"name": "Transportation", "description": "Bikes, scooters, and transportation items"},
    {"name": "Other", "description": "Miscellaneous items"},
]

LISTINGS = [
    {
        "title": 'MacBook Pro 13" 2020',
        "description": "Excellent condition MacBook Pro, barely used. Perfect for students.",
        "price": 1200,
        "category": "Electronics",
        "photo": "https://example.com/macbook.jpg",
    },
    {
        "title": "Calculus Textbook",
        "description": "Stewart Calculus 8th Edition, good condition with some highlighting.",
        "price": 80,
        "category": "Books",
        "photo": "https://example.com/calculus.jpg",
    },
    {
        "title": "Office Chair",
        "description": "Comfortable ergonomic office chair, adjustable height.",
        "price": 150,
        "category": "Furniture",
        "photo": "https://example.com/chair.jpg",
    },
    {
        "title": "iPhone 12",
        "description": "Unlocked iPhone 12, 128GB, minor scratches on the back.",
        "price": 400,
        "category": "Electronics",
        "photo": "https://example.com/iphone.jpg",
    },
    {
        "title": "Organic Chemistry Textbook",
        "description": "Klein Organic Chemistry 3rd Edition with solutions manual.",
        "price": 120,
        "category": "Books",
        "photo": "https://example.com/ochem.jpg",
    },
    {
        "title": "Mountain Bike",
        "description": "Trek mountain bike, 21 speeds, recently tuned up.",
        "price": 300,
        "category": "Transportation",
        "photo": "https://example.com/bike.jpg",
    },
    {
        "title": "Mini Fridge",
        "description": "Compact dorm fridge, works perfectly.",
        "price": 75,
        "category": "Home & Kitchen",
        "photo": "https://example.com/fridge.jpg",
    },
    {
        "title": "Winter Jacket",
        "description": "North Face winter jacket, size M, worn one season.",
        "price": 90,
        "category": "Clothing",
        "photo": "https://example.com/jacket.jpg",
        "status": ListingStatus.SOLD,
    },
]


def _get_or_create(db: Session, model, lookup: dict, defaults: dict):
    instance = db.query(model).filter_by(**lookup).first()
    if instance is None:
        instance = model(**lookup, **defaults)
        db.add(instance)
        db.flush()
    return instance


def seed_database(db: Session) -> dict:
    """Insert the sample data. Users and categories are reused if present."""
    users = [
        _get_or_create(
            db,
            User,
            {"email": u["email"]},
            {"name": u["name"]},
        )
        for u in USERS
    ]
    categories = {
        c["name"]: _get_or_create(db, Category, {"name": c["name"]}, {"description": c["description"]})
        for c in CATEGORIES
    }

    created = 0
    for idx, item in enumerate(LISTINGS):
        if db.query(Listing).filter(Listing.title == item["title"]).first():
            continue
        listing = Listing(
            title=item["title"],
            description=item["description"],
            price=item["price"],
            status=item.get("status", ListingStatus.ACTIVE),
            user_id=users[idx % len(users)].id,
            category_id=categories[item["category"]].id,
        )
        listing.photos.append(ListingPhoto(url=item["photo"], alt=item["title"], sort_order=0))
        db.add(listing)
        created += 1

    db.commit()
    return {"users": len(users), "categories": len(categories), "listings": created}


def main():
    configure_logging(get_settings().log_level)
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as db:
        result = seed_database(db)
    logger.info(
        "seeded %(users)s users, %(categories)s categories, %(listings)s new listings",
        result,
    )


if __name__ == "__main__":
    main()
