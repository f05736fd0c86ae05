"""
FastAPI 서버 설정 정의
"""
from __future__ import annotations

from pydantic import BaseModel, Field


class SearchSettings(BaseModel):
    """동영상 검색 설정"""

    # 응답 레코드에 랭킹 점수를 포함할지 여부
    include_score: bool = Field(default=True, description="응답에 점수 포함 여부")
    max_keyword_length: int = Field(default=100, ge=1, description="검색어 최대 길이")


class AppSettings(BaseModel):
    """서버 전체 설정"""

    search: SearchSettings = Field(default_factory=SearchSettings)
