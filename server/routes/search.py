"""
동영상 검색 API
"""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from videorankkit import SearchFailedError, SearchResultItem

from ..config import AppSettings
from ..dependencies import get_search_service, get_settings

router = APIRouter(prefix="/search", tags=["SEARCH"])
logger = logging.getLogger(__name__)


class SearchResponse(BaseModel):
    """검색 응답"""

    keyword: str = Field(..., description="요청 검색어")
    count: int = Field(..., ge=0, description="결과 개수")
    items: List[SearchResultItem] = Field(default_factory=list, description="랭킹 순 결과")


@router.get("", response_model=SearchResponse)
async def search_videos(
    keyword: str = Query(default="", description="검색어"),
    search_service=Depends(get_search_service),
    settings: AppSettings = Depends(get_settings),
):
    """키워드로 동영상 검색 (쇼츠 제외, 점수 순)"""
    if len(keyword) > settings.search.max_keyword_length:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"keyword는 {settings.search.max_keyword_length}자 이하여야 합니다.",
        )

    try:
        items = await search_service.search_items(
            keyword, include_score=settings.search.include_score
        )
    except SearchFailedError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(exc),
        ) from exc

    return SearchResponse(keyword=keyword.strip(), count=len(items), items=items)
