from __future__ import annotations

from datetime import datetime, timezone

import pytest

from videorankkit import SearchFailedError, SearchResultItem


def build_item(video_id: str, score: float) -> SearchResultItem:
    return SearchResultItem(
        video_id=video_id,
        title=f"Video {video_id}",
        channel_title="Lofi Girl",
        published_at=datetime(2026, 5, 1, tzinfo=timezone.utc),
        view_count=1000,
        subscriber_count=200,
        url=f"https://www.youtube.com/watch?v={video_id}",
        score=score,
    )


@pytest.mark.anyio
async def test_health(async_client):
    response = await async_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.anyio
async def test_search_returns_ranked_items(async_client, test_context):
    test_context.search.items = [build_item("a", 0.9), build_item("b", 0.4)]

    response = await async_client.get("/search", params={"keyword": " lofi "})

    assert response.status_code == 200
    body = response.json()
    assert body["keyword"] == "lofi"
    assert body["count"] == 2
    assert [item["video_id"] for item in body["items"]] == ["a", "b"]
    assert test_context.search.requests[-1] == {"keyword": " lofi ", "include_score": True}


@pytest.mark.anyio
async def test_search_respects_include_score_setting(async_client, test_context):
    test_context.settings.search.include_score = False

    await async_client.get("/search", params={"keyword": "lofi"})

    assert test_context.search.requests[-1]["include_score"] is False


@pytest.mark.anyio
async def test_blank_keyword_returns_empty(async_client):
    response = await async_client.get("/search", params={"keyword": "  "})
    assert response.status_code == 200
    assert response.json() == {"keyword": "", "count": 0, "items": []}


@pytest.mark.anyio
async def test_search_failure_maps_to_bad_gateway(async_client, test_context):
    test_context.search.error = SearchFailedError("lofi", RuntimeError("quotaExceeded"))

    response = await async_client.get("/search", params={"keyword": "lofi"})

    assert response.status_code == 502
    assert "quotaExceeded" in response.json()["detail"]


@pytest.mark.anyio
async def test_overlong_keyword_is_rejected(async_client, test_context):
    test_context.settings.search.max_keyword_length = 5

    response = await async_client.get("/search", params={"keyword": "a" * 6})

    assert response.status_code == 422
    assert test_context.search.requests == []
