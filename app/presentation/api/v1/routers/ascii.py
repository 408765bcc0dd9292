"""
Keyword-to-image endpoints backing the /ascii/{keyword} page
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.application.interfaces import IKeywordTable
from app.application.use_cases.resolve_image import ResolveImageUseCase
from app.core.pyd_schemas import ResolutionResult
from app.infrastructure.adapters.bundles.resolver import get_keyword_table
from app.presentation.api.v1.dependencies.resolver import get_resolve_image_use_case
from app.presentation.api.v1.schemas.ascii import KeywordListResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ascii")


@router.get("", response_model=KeywordListResponse)
async def list_local_keywords(table: IKeywordTable = Depends(get_keyword_table)):
    """List keywords that resolve to bundled images."""
    return KeywordListResponse(keywords=table.keywords())


@router.get("/{keyword}", response_model=ResolutionResult)
async def resolve_keyword(
    keyword: str,
    chars: Optional[str] = Query(None, description="Characters used by the ASCII renderer"),
    use_case: ResolveImageUseCase = Depends(get_resolve_image_use_case),
):
    """Resolve a keyword to an image; upstream failures surface as 502."""
    query_params = {"chars": chars} if chars is not None else {}
    return await use_case.resolve(keyword, query_params)
