"""
ISO-8601 동영상 길이 파싱 (YouTube contentDetails.duration)
"""
import re

_DURATION_RE = re.compile(r"^PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?$")


def is_compact_duration(text: str | None) -> bool:
    """PT[nH][nM][nS] 형식인지 확인"""
    return bool(text) and _DURATION_RE.match(text.strip()) is not None


def parse_duration(text: str | None) -> int:
    """
    PT[nH][nM][nS] 문자열을 초 단위로 변환

    없는 구성요소는 0으로 취급하며, 형식이 맞지 않아도 예외 없이 0을 반환
    (예: "PT1M30S" → 90, "PT2H" → 7200)
    """
    match = _DURATION_RE.match((text or "").strip())
    if not match:
        return 0
    hours = int(match.group(1) or 0)
    minutes = int(match.group(2) or 0)
    seconds = int(match.group(3) or 0)
    return hours * 3600 + minutes * 60 + seconds
