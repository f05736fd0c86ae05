"""
검색 결과 / 채널 구독자 수 캐시
"""
from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from ..config import flags
from ..models import ScoredVideo
from .store import CacheStore

logger = logging.getLogger(__name__)

_RESULTS_ADAPTER = TypeAdapter(List[ScoredVideo])


def normalize_query(query: str) -> str:
    """검색어 정규화 (앞뒤 공백 제거 + 소문자)"""
    return (query or "").strip().lower()


def result_key(query: str) -> str:
    """검색 결과 캐시 키"""
    return f"{flags.RESULT_KEY_PREFIX}{normalize_query(query)}"


def subscriber_key(channel_id: str) -> str:
    """채널 구독자 수 캐시 키"""
    return f"{flags.SUBSCRIBER_KEY_PREFIX}{channel_id}"


class ResultCache:
    """
    캐시 네임스페이스 래퍼

    저장소 장애는 miss로 취급하고 예외를 전파하지 않음
    """

    def __init__(self, store: CacheStore, ttl_seconds: int = flags.CACHE_TTL_SECONDS):
        self.store = store
        self.ttl_seconds = ttl_seconds

    def _get(self, key: str) -> Optional[str]:
        try:
            return self.store.get(key)
        except Exception as e:
            logger.warning(f"캐시 조회 실패 (key={key}): {e}")
            return None

    def _put(self, key: str, value: str) -> None:
        try:
            self.store.put(key, value, self.ttl_seconds)
        except Exception as e:
            logger.warning(f"캐시 저장 실패 (key={key}): {e}")

    # ━━━ 검색 결과 ━━━

    def get_results(self, query: str) -> Optional[List[ScoredVideo]]:
        raw = self._get(result_key(query))
        if raw is None:
            return None
        try:
            return _RESULTS_ADAPTER.validate_json(raw)
        except ValidationError as e:
            logger.warning(f"손상된 캐시 항목 무시 (query={query!r}): {e.error_count()}개 오류")
            return None

    def put_results(self, query: str, results: List[ScoredVideo]) -> None:
        self._put(result_key(query), _RESULTS_ADAPTER.dump_json(results).decode("utf-8"))

    # ━━━ 채널 구독자 수 ━━━

    def get_subscriber_count(self, channel_id: str) -> Optional[int]:
        raw = self._get(subscriber_key(channel_id))
        if raw is None:
            return None
        try:
            return max(0, int(raw))
        except ValueError:
            logger.warning(f"손상된 구독자 수 캐시 무시 (channel_id={channel_id}): {raw!r}")
            return None

    def put_subscriber_count(self, channel_id: str, count: int) -> None:
        self._put(subscriber_key(channel_id), str(int(count)))
