"""
Health check API endpoints
"""

from fastapi import APIRouter, Depends
from app.application.interfaces import IKeywordTable
from app.core.config import settings
from app.core.monitoring import health_checker, SystemHealth
from app.infrastructure.adapters.bundles.resolver import get_keyword_table

router = APIRouter(tags=["health"])


@router.get("/health", response_model=SystemHealth)
async def health_check(table: IKeywordTable = Depends(get_keyword_table)):
    """
    Health check endpoint that returns system status and metrics
    """
    return health_checker.get_system_health(
        local_keywords=len(table.keywords()),
        upstream_configured=bool(settings.unsplash_key),
    )


@router.get("/")
async def root():
    """
    Root endpoint
    """
    return {"message": "ASCII Image Resolver API is running", "status": "healthy"}
