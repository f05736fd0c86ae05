"""
검색 설정 모듈
"""
from . import flags
from .search_config import SearchConfig

__all__ = [
    "flags",
    "SearchConfig",
]
