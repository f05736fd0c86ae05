from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Dict, List

from .api import YouTubeAPIClient
from .cache import CacheStore, InMemoryCacheStore, ResultCache
from .config import flags
from .config.search_config import SearchConfig
from .models import (
    ChannelStatistics,
    ScoredVideo,
    SearchQuery,
    SearchResultItem,
    VideoCandidate,
    VideoStatistics,
)
from .utils import classify_short_form, compute_score, run_stage

logger = logging.getLogger(__name__)


class SearchFailedError(RuntimeError):
    """검색 파이프라인 실패 (사용자 노출용)"""

    def __init__(self, keyword: str, cause: BaseException):
        super().__init__(f"동영상 검색 실패: {cause}")
        self.keyword = keyword
        self.cause = cause


class VideoSearchService:
    """Keyword search → shorts filter → weighted ranking, with result caching."""

    def __init__(
        self,
        yt_client: YouTubeAPIClient | None = None,
        cache_store: CacheStore | None = None,
        *,
        fetch_timeout: float | None = None,
        concurrency: int | None = None,
    ):
        if yt_client is None:
            SearchConfig.validate()
        self.yt = yt_client or YouTubeAPIClient(api_key=SearchConfig.YOUTUBE_API_KEY)
        self.cache = ResultCache(cache_store if cache_store is not None else InMemoryCacheStore())
        self.fetch_timeout = SearchConfig.FETCH_TIMEOUT if fetch_timeout is None else fetch_timeout
        self.concurrency = SearchConfig.ENRICH_CONCURRENCY if concurrency is None else concurrency
        if self.fetch_timeout <= 0:
            raise ValueError(f"fetch_timeout은 0보다 커야 합니다: {self.fetch_timeout}")
        if self.concurrency < 1:
            raise ValueError(f"concurrency는 1 이상이어야 합니다: {self.concurrency}")

    async def close(self):
        if hasattr(self.yt, "close"):
            await self.yt.close()

    async def search(self, keyword: str) -> List[ScoredVideo]:
        # 1) Validate
        if not (keyword or "").strip():
            return []
        query = SearchQuery(keyword=keyword)

        # 2) Cache lookup
        cached = self.cache.get_results(query.keyword)
        if cached is not None:
            logger.info(f"💾 캐시 적중: {query.keyword!r} ({len(cached)}개)")
            return cached

        try:
            results = await self._run_pipeline(query.keyword)
        except Exception as e:
            logger.exception(f"검색 실패 (keyword={query.keyword!r})")
            raise SearchFailedError(query.keyword, e) from e

        # 8) Cache & return (empty sets are not cached)
        if results:
            self.cache.put_results(query.keyword, results)
        return results

    async def search_items(self, keyword: str, include_score: bool = True) -> List[SearchResultItem]:
        """화면 표시용 레코드로 변환해 반환"""
        return [r.to_item(include_score=include_score) for r in await self.search(keyword)]

    async def _run_pipeline(self, keyword: str) -> List[ScoredVideo]:
        # 3) Fetch candidates (over-fetch to survive shorts filtering)
        candidates = await self.yt.search_videos(
            q=keyword,
            max_results=flags.MAX_SEARCH_RESULTS,
            type_filter=flags.SEARCH_TYPE,
            region_code=SearchConfig.REGION_CODE,
            relevance_language=SearchConfig.RELEVANCE_LANGUAGE,
        )
        if not candidates:
            logger.info(f"🧊 검색 결과 없음: {keyword!r}")
            return []

        semaphore = asyncio.Semaphore(self.concurrency)

        # 4) Classify & filter
        async def is_short(candidate: VideoCandidate) -> bool:
            async with semaphore:
                return await classify_short_form(self.yt, candidate, timeout=self.fetch_timeout)

        verdicts = await asyncio.gather(*[is_short(c) for c in candidates])
        survivors = [c for c, short in zip(candidates, verdicts) if not short]
        logger.info(
            f"🎬 쇼츠 필터링: {len(candidates)}개 → {len(survivors)}개 "
            f"(제외 {len(candidates) - len(survivors)}개)"
        )
        if not survivors:
            return []

        # 5) Enrich
        channel_tasks: Dict[str, asyncio.Task] = {}

        def channel_stats(channel_id: str) -> asyncio.Task:
            # One lookup per channel per request
            if channel_id not in channel_tasks:
                channel_tasks[channel_id] = asyncio.ensure_future(self._subscriber_count(channel_id, semaphore))
            return channel_tasks[channel_id]

        async def enrich(candidate: VideoCandidate):
            async with semaphore:
                stats = await run_stage(
                    f"statistics({candidate.video_id})",
                    lambda: self.yt.get_video_statistics(candidate.video_id),
                    default=VideoStatistics(),
                    timeout=self.fetch_timeout,
                )
            channel = await channel_stats(candidate.channel_id)
            return candidate, stats.value, channel

        enriched = await asyncio.gather(*[enrich(c) for c in survivors])

        # 6) Score
        now = datetime.now(timezone.utc)
        scored = [
            ScoredVideo(
                video=candidate,
                statistics=stats,
                channel=channel,
                score=compute_score(
                    published_at=candidate.published_at,
                    view_count=stats.view_count,
                    subscriber_count=channel.subscriber_count,
                    now=now,
                ),
            )
            for candidate, stats, channel in enriched
        ]

        # 7) Rank & cap (sorted() is stable)
        ranked = sorted(scored, key=lambda r: r.score, reverse=True)
        final = ranked[: flags.RESULT_LIMIT]
        logger.info(f"✅ 검색 완료: {keyword!r} → {len(final)}개 반환 (후보 {len(scored)}개)")
        return final

    async def _subscriber_count(self, channel_id: str, semaphore: asyncio.Semaphore) -> ChannelStatistics:
        if not channel_id:
            return ChannelStatistics()

        cached = self.cache.get_subscriber_count(channel_id)
        if cached is not None:
            return ChannelStatistics(subscriber_count=cached)

        async with semaphore:
            result = await run_stage(
                f"channelStatistics({channel_id})",
                lambda: self.yt.get_channel_statistics(channel_id),
                default=ChannelStatistics(),
                timeout=self.fetch_timeout,
            )
        if result.ok:
            self.cache.put_subscriber_count(channel_id, result.value.subscriber_count)
        return result.value
