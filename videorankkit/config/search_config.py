"""
검색 모듈 설정
"""
import os
from dotenv import load_dotenv

# .env 파일 로드
load_dotenv()


class SearchConfig:
    """검색 모듈 설정"""

    # ━━━ YouTube Data API v3 ━━━
    YOUTUBE_API_KEY: str = os.getenv("YOUTUBE_API_KEY") or os.getenv("KEY", "")
    TIMEOUT: float = float(os.getenv("YT_TIMEOUT", "10"))  # HTTP 타임아웃 (초)
    FETCH_TIMEOUT: float = float(os.getenv("YT_FETCH_TIMEOUT", "5"))  # 후보별 조회 타임아웃 (초)

    # ━━━ 검색 힌트 ━━━
    REGION_CODE: str = os.getenv("YT_REGION_CODE", "KR")
    RELEVANCE_LANGUAGE: str = os.getenv("YT_RELEVANCE_LANGUAGE", "ko")

    # ━━━ 병렬 처리 ━━━
    ENRICH_CONCURRENCY: int = int(os.getenv("YT_ENRICH_CONCURRENCY", "10"))  # 동시 조회 수 (Semaphore 제한)

    # ━━━ Offline 모드 ━━━
    OFFLINE_MODE: bool = os.getenv("YT_OFFLINE_MODE", "0") == "1"

    @classmethod
    def validate(cls):
        """설정 검증"""
        from . import flags

        if not cls.OFFLINE_MODE and not cls.YOUTUBE_API_KEY:
            raise ValueError("YOUTUBE_API_KEY 환경 변수가 설정되지 않았습니다.")

        if flags.MAX_SEARCH_RESULTS < 1 or flags.MAX_SEARCH_RESULTS > 50:
            raise ValueError(f"MAX_SEARCH_RESULTS는 1~50 사이여야 합니다: {flags.MAX_SEARCH_RESULTS}")

        if cls.ENRICH_CONCURRENCY < 1:
            raise ValueError(
                f"ENRICH_CONCURRENCY는 1 이상이어야 합니다: {cls.ENRICH_CONCURRENCY}"
            )

        if cls.FETCH_TIMEOUT <= 0:
            raise ValueError(f"FETCH_TIMEOUT은 0보다 커야 합니다: {cls.FETCH_TIMEOUT}")
