"""Comment statistics use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from engage.domain.model import HashtagTrend, TagCount
from engage.domain.service import AggregationService
from engage.domain.value import ContentId


class TrendingHashtagsRequest(BaseModel):
    """Trending hashtags request. Omitted values use the configured defaults."""

    window_days: int | None = None
    limit: int | None = None


class TrendingHashtagsResponse(BaseModel):
    """Trending hashtags response."""

    hashtags: list[HashtagTrend]


class CommentStatisticsRequest(BaseModel):
    """Comment statistics request."""

    content_id: str  # UUID string


class MentionItem(BaseModel):
    """Mentioned actor."""

    actor_id: str
    count: int


class CommentStatisticsResponse(BaseModel):
    """Comment statistics response."""

    content_id: str
    total_comments: int
    total_replies: int
    total_likes: int
    average_sentiment: float
    window_days: int
    top_hashtags: list[TagCount]
    top_mentions: list[MentionItem]
    computed_at: datetime


class TrendingHashtagsUseCase:
    """Use case for hashtags trending across all content."""

    def __init__(self, aggregation_service: AggregationService) -> None:
        """Initialize trending hashtags use case.

        Args:
            aggregation_service: Aggregation domain service
        """
        self.aggregation_service = aggregation_service

    async def execute(self, request: TrendingHashtagsRequest) -> TrendingHashtagsResponse:
        """Execute trending hashtags flow.

        Raises:
            ValidationError: If window_days or limit is out of range
        """
        hashtags = await self.aggregation_service.trending_hashtags(
            window_days=request.window_days, limit=request.limit
        )
        return TrendingHashtagsResponse(hashtags=hashtags)


class CommentStatisticsUseCase:
    """Use case for the comment activity of a content item."""

    def __init__(self, aggregation_service: AggregationService) -> None:
        """Initialize comment statistics use case.

        Args:
            aggregation_service: Aggregation domain service
        """
        self.aggregation_service = aggregation_service

    async def execute(
        self, request: CommentStatisticsRequest
    ) -> CommentStatisticsResponse:
        stats = await self.aggregation_service.comment_statistics(
            ContentId(UUID(request.content_id))
        )
        return CommentStatisticsResponse(
            content_id=str(stats.content_id),
            total_comments=stats.total_comments,
            total_replies=stats.total_replies,
            total_likes=stats.total_likes,
            average_sentiment=stats.average_sentiment,
            window_days=stats.window_days,
            top_hashtags=stats.top_hashtags,
            top_mentions=[
                MentionItem(actor_id=str(m.actor_id), count=m.count)
                for m in stats.top_mentions
            ],
            computed_at=stats.computed_at,
        )
