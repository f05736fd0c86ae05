"""
FastAPI 라우터 모음
"""

from .search import router as search_router

__all__ = ["search_router"]
