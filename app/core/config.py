from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


# project root (folder holding pyproject.toml)
BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    # app
    app_name: str = "Campus Marketplace Search"
    app_env: str = "dev"
    log_level: str = "INFO"

    # DB
    database_url: str = f"sqlite:///{BASE_DIR / 'campus_market.db'}"

    # search engine limits
    search_default_page_size: int = 20
    search_max_page_size: int = 100
    search_max_query_length: int = 100

    # CORS (dev default: everything)
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",    # .env may carry values for other services
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
