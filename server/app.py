"""
FastAPI 애플리케이션 생성
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from .config import AppSettings
from .routes import search_router


def _ensure_service(service: Any, factory_path: str):
    """지연 로딩으로 서비스 인스턴스 확보"""
    if service is not None:
        return service

    module_name, attr = factory_path.rsplit(".", 1)
    module = __import__(module_name, fromlist=[attr])
    factory = getattr(module, attr)
    return factory()


def create_app(
    settings: AppSettings | None = None,
    *,
    search_service=None,
) -> FastAPI:
    """FastAPI 앱 생성"""
    base_settings = settings or AppSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # 서비스 및 설정 초기화 (지연 로딩)
        _search = _ensure_service(search_service, "videorankkit.service.VideoSearchService")

        app.state.app_settings = base_settings
        app.state.search_service = _search

        try:
            yield
        finally:
            if search_service is None and hasattr(_search, "close"):
                await _search.close()

    app = FastAPI(
        title="VideoRank API",
        version="0.1.0",
        description="쇼츠를 제외한 유튜브 동영상 검색/랭킹 API",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    # 주입된 서비스는 lifespan 없이도 바로 사용 가능
    app.state.app_settings = base_settings
    if search_service is not None:
        app.state.search_service = search_service

    app.include_router(search_router)

    @app.get("/health")
    async def health_check():
        """간단한 헬스 체크"""
        return {"status": "ok"}

    return app
