from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from app.core.config import get_settings

settings = get_settings()


def normalize_database_url(url: str) -> str:
    # Render/Heroku hand out 'postgres://', SQLAlchemy requires 'postgresql://'
    if url and url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


def build_engine(url: str):
    url = normalize_database_url(url)
    return create_engine(
        url,
        # "check_same_thread" is ONLY for SQLite; search runs fetch/count on worker threads
        connect_args={"check_same_thread": False} if url.startswith("sqlite") else {},
    )


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()
