"""
캐시 모듈
"""
from .store import CacheStore, CacheEntry, InMemoryCacheStore
from .result_cache import ResultCache, normalize_query, result_key, subscriber_key

__all__ = [
    "CacheStore",
    "CacheEntry",
    "InMemoryCacheStore",
    "ResultCache",
    "normalize_query",
    "result_key",
    "subscriber_key",
]
