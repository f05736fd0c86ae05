"""
FastAPI 의존성 헬퍼
"""
from __future__ import annotations

from fastapi import Request

from .config import AppSettings

async def get_settings(request: Request) -> AppSettings:
    """앱 설정 조회"""
    return request.app.state.app_settings


async def get_search_service(request: Request):
    """동영상 검색 서비스 인스턴스"""
    return request.app.state.search_service
