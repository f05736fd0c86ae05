"""
쇼츠(short-form) 판별
"""
from __future__ import annotations

import logging
from typing import Iterable

from ..config import flags
from ..models import VideoCandidate
from .duration import is_compact_duration, parse_duration
from .stage import run_stage

logger = logging.getLogger(__name__)


def has_short_form_keyword(
    title: str,
    description: str,
    keywords: Iterable[str] = flags.SHORT_FORM_KEYWORDS,
) -> bool:
    """제목/설명에 쇼츠 키워드가 포함되어 있는지 확인 (소문자 부분 일치)"""
    text = f"{title or ''} {description or ''}".lower()
    return any(k.lower() in text for k in keywords)


def is_short_duration(duration: str | None) -> bool | None:
    """길이 기준 쇼츠 여부 (판단 불가하면 None)"""
    if not is_compact_duration(duration):
        return None
    return parse_duration(duration) <= flags.SHORT_FORM_MAX_SECONDS


async def classify_short_form(source, candidate: VideoCandidate, *, timeout: float | None = None) -> bool:
    """
    쇼츠 여부 판별

    - 키워드 일치 OR 길이 60초 이하 → 쇼츠
    - 길이 정보가 없으면 키워드 결과만 사용
    - 조회 실패/타임아웃 등 오류 시 쇼츠가 아닌 것으로 간주 (False)
    - 후보에 길이가 이미 있으면 조회 생략
    """
    try:
        keyword_hit = has_short_form_keyword(candidate.title, candidate.description)

        duration = candidate.duration
        if duration is None:
            details = await run_stage(
                f"contentDetails({candidate.video_id})",
                lambda: source.get_content_details(candidate.video_id),
                default=None,
                timeout=timeout,
            )
            if details.degraded:
                return False
            duration = details.value

        short_by_length = is_short_duration(duration)
        if short_by_length is None:
            return keyword_hit
        return keyword_hit or short_by_length
    except Exception as e:
        logger.warning(f"쇼츠 판별 실패 (video_id={candidate.video_id}): {e}")
        return False
