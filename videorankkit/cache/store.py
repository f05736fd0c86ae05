"""
캐시 저장소 (key → 직렬화 텍스트, TTL)
"""
from __future__ import annotations

import time
from typing import Callable, NamedTuple, Optional, Protocol

from cachetools import TLRUCache

from ..config import flags


class CacheStore(Protocol):
    """캐시 저장소 인터페이스"""

    def get(self, key: str) -> Optional[str]:
        ...

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        ...


class CacheEntry(NamedTuple):
    """캐시 항목"""
    value: str
    ttl_seconds: float


def _expires_at(key: str, entry: CacheEntry, now: float) -> float:
    return now + entry.ttl_seconds


class InMemoryCacheStore:
    """
    프로세스 메모리 TTL 캐시

    항목별 TTL + 최대 개수 제한 (만료 항목은 쓰기 시 정리, 초과 시 LRU 제거)
    """

    def __init__(
        self,
        maxsize: int = flags.CACHE_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._cache: TLRUCache = TLRUCache(maxsize=maxsize, ttu=_expires_at, timer=clock)

    def get(self, key: str) -> Optional[str]:
        entry = self._cache.get(key)
        return entry.value if entry is not None else None

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        self._cache[key] = CacheEntry(value=value, ttl_seconds=ttl_seconds)

    def __len__(self) -> int:
        self._cache.expire()
        return len(self._cache)
