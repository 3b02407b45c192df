"""Unit tests for CommentStatisticsUseCase and TrendingHashtagsUseCase."""

from uuid import uuid4

from dishka import AsyncContainer
import pytest

from engage.application.usecase.comment import (
    CommentStatisticsRequest,
    CommentStatisticsUseCase,
    CreateCommentRequest,
    CreateCommentUseCase,
    LikeCommentRequest,
    LikeCommentUseCase,
    TrendingHashtagsRequest,
    TrendingHashtagsUseCase,
)
from engage.domain.error import ValidationError
from engage.domain.service import AggregationService, CommentService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCommentStatisticsUseCase:
    """Tests for CommentStatisticsUseCase."""

    @pytest.mark.asyncio
    async def test_statistics_for_content(self, unit_env: AsyncContainer):
        """Totals, sentiment and top lists reflect the live comments."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        create = CreateCommentUseCase(comment_service=comment_service)
        content_id = str(uuid4())
        mentioned = str(uuid4())
        top = await create.execute(
            CreateCommentRequest(
                actor_id=str(uuid4()),
                content_id=content_id,
                text="#roots matter",
                mentions=[mentioned],
                sentiment_score=0.5,
            )
        )
        await create.execute(
            CreateCommentRequest(
                actor_id=str(uuid4()),
                content_id=content_id,
                text="Agreed #roots #family",
                parent_id=top.comment_id,
                mentions=[mentioned],
                sentiment_score=-0.1,
            )
        )
        await LikeCommentUseCase(comment_service=comment_service).execute(
            LikeCommentRequest(actor_id=str(uuid4()), comment_id=top.comment_id)
        )
        use_case = CommentStatisticsUseCase(
            aggregation_service=await unit_env.get(AggregationService)
        )

        # Act
        response = await use_case.execute(
            CommentStatisticsRequest(content_id=content_id)
        )

        # Assert
        assert response.content_id == content_id
        assert response.total_comments == 2
        assert response.total_replies == 1
        assert response.total_likes == 1
        assert response.average_sentiment == pytest.approx(0.2)
        assert [(t.tag, t.count) for t in response.top_hashtags] == [
            ("roots", 2),
            ("family", 1),
        ]
        assert [(m.actor_id, m.count) for m in response.top_mentions] == [
            (mentioned, 2)
        ]

    @pytest.mark.asyncio
    async def test_statistics_for_quiet_content(self, unit_env: AsyncContainer):
        """Content without comments reports zeros."""
        # Arrange
        use_case = CommentStatisticsUseCase(
            aggregation_service=await unit_env.get(AggregationService)
        )

        # Act
        response = await use_case.execute(
            CommentStatisticsRequest(content_id=str(uuid4()))
        )

        # Assert
        assert response.total_comments == 0
        assert response.average_sentiment == 0.0
        assert response.top_hashtags == []
        assert response.top_mentions == []


class TestTrendingHashtagsUseCase:
    """Tests for TrendingHashtagsUseCase."""

    @pytest.mark.asyncio
    async def test_trending_hashtags_across_content(self, unit_env: AsyncContainer):
        """Hashtags are counted across every content item."""
        # Arrange
        create = CreateCommentUseCase(comment_service=await unit_env.get(CommentService))
        for text in ["#holi colours", "#Holi again", "#eid mubarak"]:
            await create.execute(
                CreateCommentRequest(
                    actor_id=str(uuid4()), content_id=str(uuid4()), text=text
                )
            )
        use_case = TrendingHashtagsUseCase(
            aggregation_service=await unit_env.get(AggregationService)
        )

        # Act
        response = await use_case.execute(TrendingHashtagsRequest(limit=1))

        # Assert
        assert [(h.hashtag, h.count) for h in response.hashtags] == [("holi", 2)]

    @pytest.mark.asyncio
    async def test_trending_rejects_bad_window(self, unit_env: AsyncContainer):
        """A zero-day window fails validation."""
        # Arrange
        use_case = TrendingHashtagsUseCase(
            aggregation_service=await unit_env.get(AggregationService)
        )

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(TrendingHashtagsRequest(window_days=0))
