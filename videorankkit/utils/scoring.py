"""
랭킹 점수 계산 (최신성 + 조회수 + 구독자 수)
"""
from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

from ..config import flags

_RECENCY_WINDOW_MS = timedelta(days=flags.RECENCY_WINDOW_DAYS).total_seconds() * 1000


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def recency_score(published_at: datetime, now: datetime) -> float:
    """최신성 점수: 1년에 걸쳐 선형 감소, 1년 이상이면 0"""
    age_ms = (_as_utc(now) - _as_utc(published_at)).total_seconds() * 1000
    return max(0.0, 1.0 - age_ms / _RECENCY_WINDOW_MS)


def _log_score(count: int) -> float:
    return math.log10(max(0, count) + 1) / 10.0


def views_score(view_count: int) -> float:
    """조회수 점수 (로그 스케일)"""
    return _log_score(view_count)


def subscribers_score(subscriber_count: int) -> float:
    """구독자 수 점수 (로그 스케일)"""
    return _log_score(subscriber_count)


def compute_score(
    *,
    published_at: datetime,
    view_count: int,
    subscriber_count: int,
    now: datetime,
) -> float:
    """
    복합 랭킹 점수 계산

    - 최신성 (flags.WEIGHT_RECENCY)
    - 조회수 (flags.WEIGHT_VIEWS)
    - 구독자 수 (flags.WEIGHT_SUBSCRIBERS)
    """
    return (
        flags.WEIGHT_RECENCY * recency_score(published_at, now)
        + flags.WEIGHT_VIEWS * views_score(view_count)
        + flags.WEIGHT_SUBSCRIBERS * subscribers_score(subscriber_count)
    )
