"""
VideoRankKit - 키워드 기반 유튜브 동영상 검색/랭킹 모듈

쇼츠를 제외한 검색 결과를 최신성/조회수/구독자 수로 랭킹하고 캐시합니다.
"""

from .service import VideoSearchService, SearchFailedError
from .models import (
    SearchQuery,
    VideoCandidate,
    VideoStatistics,
    ChannelStatistics,
    ScoredVideo,
    SearchResultItem,
)

__version__ = "0.1.0"

__all__ = [
    "VideoSearchService",
    "SearchFailedError",
    "SearchQuery",
    "VideoCandidate",
    "VideoStatistics",
    "ChannelStatistics",
    "ScoredVideo",
    "SearchResultItem",
]
