import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.core.database import Base, engine
from app.core.logging_config import configure_logging
# register every mapped class before create_all / relationship resolution
from app.models import category, listing, listing_photo, user  # noqa: F401
from app.routers import health, listings
from app.services.listing_store import SearchStoreError

# --- Load settings ---
settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)

# --- Create FastAPI app ---
app = FastAPI(title=settings.app_name)

# --- CORS ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def create_tables():
    Base.metadata.create_all(bind=engine)
    logger.info("database schema ready (%s)", settings.app_env)


@app.exception_handler(SearchStoreError)
async def search_store_error_handler(request: Request, exc: SearchStoreError):
    # no partial results: the whole request fails
    logger.error("search store failure on %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error("unhandled error on %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


# --- Routers ---
app.include_router(health.router)
app.include_router(listings.router)


# --- Root endpoint ---
@app.get("/")
def root():
    return {"message": f"{settings.app_name} is running"}
