"""
YouTube API 클라이언트 (Data API v3)
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import httpx

from ..config import flags
from ..config.search_config import SearchConfig
from ..models import ChannelStatistics, VideoCandidate, VideoStatistics

logger = logging.getLogger(__name__)


class YouTubeAPIClient:
    """YouTube Data API v3 클라이언트"""

    BASE = "https://www.googleapis.com/youtube/v3"

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
        offline: bool | None = None,
    ):
        self.api_key = api_key if api_key is not None else SearchConfig.YOUTUBE_API_KEY
        self.timeout = timeout or SearchConfig.TIMEOUT
        self.offline = SearchConfig.OFFLINE_MODE if offline is None else offline
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(
            timeout=self.timeout,
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
        )

    @property
    def is_offline(self) -> bool:
        return self.offline or not self.api_key

    async def close(self):
        if self._owns_client:
            await self.http_client.aclose()

    async def _get(self, resource: str, params: Dict[str, Any]) -> Dict[str, Any]:
        resp = await self.http_client.get(
            f"{self.BASE}/{resource}",
            params={**params, "key": self.api_key},
        )
        resp.raise_for_status()
        return resp.json()

    async def _first_item(self, resource: str, part: str, item_id: str) -> Dict[str, Any]:
        data = await self._get(resource, {"part": part, "id": item_id})
        items = data.get("items") or []
        return items[0] if items else {}

    async def search_videos(
        self,
        q: str,
        max_results: int = flags.MAX_SEARCH_RESULTS,
        type_filter: str = flags.SEARCH_TYPE,
        region_code: str | None = None,
        relevance_language: str | None = None,
    ) -> List[VideoCandidate]:
        """YouTube 동영상 검색 (결과가 없으면 빈 리스트)"""
        if self.is_offline:
            return self._stub_search(q, max_results)

        params = {
            "part": "snippet",
            "type": type_filter,
            "q": q,
            "maxResults": max_results,
            "regionCode": region_code or SearchConfig.REGION_CODE,
            "relevanceLanguage": relevance_language or SearchConfig.RELEVANCE_LANGUAGE,
        }
        data = await self._get("search", params)

        items: List[VideoCandidate] = []
        for it in data.get("items", []):
            vid = (it.get("id") or {}).get("videoId")
            sn = it.get("snippet") or {}
            if not vid or not sn.get("publishedAt"):
                continue
            items.append(
                VideoCandidate(
                    video_id=vid,
                    title=sn.get("title", ""),
                    description=sn.get("description", ""),
                    channel_id=sn.get("channelId", ""),
                    channel_title=sn.get("channelTitle", ""),
                    published_at=sn["publishedAt"],
                )
            )
        logger.info(f"🔍 YouTube 검색: q={q!r}, 후보 {len(items)}개")
        return items

    async def get_video_statistics(self, video_id: str) -> VideoStatistics:
        """동영상 조회수"""
        if self.is_offline:
            return VideoStatistics(view_count=1000 + (sum(map(ord, video_id)) % 50) * 100)
        item = await self._first_item("videos", "statistics", video_id)
        return VideoStatistics(view_count=(item.get("statistics") or {}).get("viewCount"))

    async def get_content_details(self, video_id: str) -> Optional[str]:
        """동영상 길이 (ISO-8601, 없으면 None)"""
        if self.is_offline:
            return "PT45S" if video_id.endswith("_short") else "PT10M"
        item = await self._first_item("videos", "contentDetails", video_id)
        return (item.get("contentDetails") or {}).get("duration")

    async def get_channel_statistics(self, channel_id: str) -> ChannelStatistics:
        """채널 구독자 수"""
        if self.is_offline:
            return ChannelStatistics(subscriber_count=5000)
        item = await self._first_item("channels", "statistics", channel_id)
        return ChannelStatistics(subscriber_count=(item.get("statistics") or {}).get("subscriberCount"))

    def _stub_search(self, q: str, max_results: int) -> List[VideoCandidate]:
        # Offline stub
        now = datetime.now(timezone.utc)
        return [
            VideoCandidate(
                video_id=f"stub_{i}_short" if i % 5 == 0 else f"stub_{i}",
                title=f"{q} video {i}",
                description=f"This is a stub video about {q}.",
                channel_id=f"stub_channel_{i % 3}",
                channel_title="StubChannel",
                published_at=now - timedelta(days=i * 7),
            )
            for i in range(1, min(max_results, 10) + 1)
        ]
