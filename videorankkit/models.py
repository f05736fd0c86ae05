"""
VideoRankKit 데이터 모델 정의
"""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def coerce_count(value: Any) -> int:
    """API 숫자 필드를 음수가 아닌 정수로 변환 (없거나 잘못된 값은 0)"""
    try:
        count = int(value)
    except (TypeError, ValueError):
        return 0
    return max(0, count)


class SearchQuery(BaseModel):
    """검색 키워드"""
    keyword: str = Field(..., min_length=1, description="앞뒤 공백이 제거된 검색어")

    @field_validator("keyword", mode="before")
    @classmethod
    def strip_keyword(cls, v: str) -> str:
        return (v or "").strip()


class VideoCandidate(BaseModel):
    """YouTube 검색 결과 후보"""
    model_config = ConfigDict(frozen=True)

    video_id: str = Field(..., description="동영상 ID")
    title: str = Field(default="", description="동영상 제목")
    description: str = Field(default="", description="동영상 설명")
    channel_id: str = Field(default="", description="채널 ID")
    channel_title: str = Field(default="", description="채널 이름")
    published_at: datetime = Field(..., description="게시 시각 (UTC)")
    duration: Optional[str] = Field(default=None, description="ISO-8601 길이 (PT#H#M#S)")

    def url(self) -> str:
        return f"https://www.youtube.com/watch?v={self.video_id}"


class VideoStatistics(BaseModel):
    """동영상 통계"""
    model_config = ConfigDict(frozen=True)

    view_count: int = Field(default=0, ge=0, description="조회수")

    @field_validator("view_count", mode="before")
    @classmethod
    def default_view_count(cls, v: Any) -> int:
        return coerce_count(v)


class ChannelStatistics(BaseModel):
    """채널 통계"""
    model_config = ConfigDict(frozen=True)

    subscriber_count: int = Field(default=0, ge=0, description="구독자 수")

    @field_validator("subscriber_count", mode="before")
    @classmethod
    def default_subscriber_count(cls, v: Any) -> int:
        return coerce_count(v)


class SearchResultItem(BaseModel):
    """화면 표시용 결과 레코드"""
    video_id: str
    title: str
    channel_title: str
    published_at: datetime
    view_count: int
    subscriber_count: int
    url: str
    score: Optional[float] = None


class ScoredVideo(BaseModel):
    """점수가 매겨진 동영상"""
    model_config = ConfigDict(frozen=True)

    video: VideoCandidate
    statistics: VideoStatistics = Field(default_factory=VideoStatistics)
    channel: ChannelStatistics = Field(default_factory=ChannelStatistics)
    score: float = Field(..., description="복합 랭킹 점수")

    def url(self) -> str:
        return self.video.url()

    def to_item(self, include_score: bool = True) -> SearchResultItem:
        return SearchResultItem(
            video_id=self.video.video_id,
            title=self.video.title,
            channel_title=self.video.channel_title,
            published_at=self.video.published_at,
            view_count=self.statistics.view_count,
            subscriber_count=self.channel.subscriber_count,
            url=self.url(),
            score=round(self.score, 4) if include_score else None,
        )
