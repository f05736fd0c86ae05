from __future__ import annotations

import asyncio
import sys
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Tuple

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from server.app import create_app
from server.config import AppSettings
from videorankkit import SearchResultItem, VideoSearchService
from videorankkit.cache import InMemoryCacheStore
from videorankkit.models import ChannelStatistics, VideoCandidate, VideoStatistics


def make_candidate(
    video_id: str,
    *,
    title: Optional[str] = None,
    description: str = "",
    channel_id: str = "ch1",
    days_old: float = 10,
    now: Optional[datetime] = None,
) -> VideoCandidate:
    now = now or datetime.now(timezone.utc)
    return VideoCandidate(
        video_id=video_id,
        title=title if title is not None else f"Video {video_id}",
        description=description,
        channel_id=channel_id,
        channel_title=f"Channel {channel_id}",
        published_at=now - timedelta(days=days_old),
    )


class FakeClock:
    """수동으로 진행시키는 시계"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class StubYouTubeSource:
    """YouTube API 클라이언트 스텁"""

    def __init__(self):
        self.candidates: List[VideoCandidate] = []
        self.durations: Dict[str, Optional[str]] = {}
        self.views: Dict[str, Any] = {}
        self.subscribers: Dict[str, Any] = {}
        self.search_error: Optional[Exception] = None
        self.failing_videos: Set[str] = set()
        self.failing_details: Set[str] = set()
        self.failing_channels: Set[str] = set()
        self.slow_videos: Set[str] = set()
        self.delay: float = 1.0
        self.calls: List[Tuple[str, Any]] = []

    async def search_videos(self, q, max_results=50, type_filter="video", region_code=None, relevance_language=None):
        self.calls.append(("search", {"q": q, "max_results": max_results, "type_filter": type_filter}))
        if self.search_error:
            raise self.search_error
        return list(self.candidates[:max_results])

    async def get_content_details(self, video_id: str):
        self.calls.append(("details", video_id))
        if video_id in self.failing_details:
            raise RuntimeError(f"details failed: {video_id}")
        return self.durations.get(video_id, "PT5M")

    async def get_video_statistics(self, video_id: str) -> VideoStatistics:
        self.calls.append(("statistics", video_id))
        if video_id in self.failing_videos:
            raise RuntimeError(f"statistics failed: {video_id}")
        if video_id in self.slow_videos:
            await asyncio.sleep(self.delay)
        return VideoStatistics(view_count=self.views.get(video_id, 0))

    async def get_channel_statistics(self, channel_id: str) -> ChannelStatistics:
        self.calls.append(("channel", channel_id))
        if channel_id in self.failing_channels:
            raise RuntimeError(f"channel failed: {channel_id}")
        return ChannelStatistics(subscriber_count=self.subscribers.get(channel_id, 0))

    def call_names(self) -> List[str]:
        return [name for name, _ in self.calls]


class BrokenCacheStore:
    """항상 실패하는 캐시 저장소"""

    def get(self, key):
        raise ConnectionError("cache down")

    def put(self, key, value, ttl_seconds):
        raise ConnectionError("cache down")


class StubSearchService:
    """검색 서비스 스텁 (API 테스트용)"""

    def __init__(self):
        self.items: List[SearchResultItem] = []
        self.error: Optional[Exception] = None
        self.requests: List[Dict[str, Any]] = []

    async def search_items(self, keyword: str, include_score: bool = True):
        self.requests.append({"keyword": keyword, "include_score": include_score})
        if self.error:
            raise self.error
        return list(self.items)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def source() -> StubYouTubeSource:
    return StubYouTubeSource()


@pytest.fixture
def cache_store() -> InMemoryCacheStore:
    return InMemoryCacheStore()


@pytest.fixture
def service(source, cache_store) -> VideoSearchService:
    return VideoSearchService(source, cache_store, fetch_timeout=0.5, concurrency=8)


@dataclass
class TestContext:
    """API 테스트에서 사용할 스텁 모음"""

    search: StubSearchService = field(default_factory=StubSearchService)
    settings: AppSettings = field(default_factory=AppSettings)


@pytest.fixture
def test_context() -> TestContext:
    return TestContext()


@pytest.fixture
def fastapi_app(test_context: TestContext) -> FastAPI:
    return create_app(test_context.settings, search_service=test_context.search)


@pytest.fixture
async def async_client(fastapi_app: FastAPI):
    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
