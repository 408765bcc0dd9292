import os
import logging
from logging.handlers import RotatingFileHandler

from fastapi import FastAPI, APIRouter
import uvicorn
from contextlib import asynccontextmanager

from app.core.exceptions import (
    ImageResolutionError,
    general_exception_handler,
    image_resolution_exception_handler,
)
from app.core.middleware import (
    RateLimitMiddleware,
    RequestLoggingMiddleware,
)
from app.infrastructure.adapters.bundles.resolver import get_keyword_table
from app.presentation.api.v1.routers import ascii as ascii_router
from app.presentation.api.v1.routers import health
from app.core.config import settings


# Configure logging: console, plus a rotating file when LOG_FILE is set
log_handlers = [logging.StreamHandler()]
if settings.log_file:
    os.makedirs(os.path.dirname(settings.log_file) or ".", exist_ok=True)
    log_handlers.append(
        RotatingFileHandler(
            settings.log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=2,
            encoding="utf-8",
        )
    )
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format=settings.log_format,
    datefmt=settings.log_date_format,
    handlers=log_handlers,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    logger.info("Starting ASCII Image Resolver API...")
    # Build the keyword table up front so a bad table fails at startup
    table = get_keyword_table()
    logger.info("Keyword table ready with %d keywords", len(table.keywords()))
    if not settings.unsplash_key:
        logger.warning("UNSPLASH_KEY is not set; keyword misses will fail upstream")
    yield
    logger.info("Shutting down ASCII Image Resolver API...")


def create_application() -> FastAPI:
    """Create and configure FastAPI application"""

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        RateLimitMiddleware,
        calls=settings.max_requests_per_minute,
        period=60,
    )

    app.add_exception_handler(ImageResolutionError, image_resolution_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include API routers under versioned prefix
    api_v1 = APIRouter(prefix="/api/v1")
    api_v1.include_router(ascii_router.router, tags=["ascii"])
    api_v1.include_router(health.router)
    app.include_router(api_v1)

    return app


# Create application instance
app = create_application()

if __name__ == "__main__":
    dev_mode = os.getenv("DEV_MODE", "true").lower() == "true"
    uvicorn.run(
        "app.presentation.main:app",
        host=settings.host,
        port=settings.port,
        reload=dev_mode,
    )
