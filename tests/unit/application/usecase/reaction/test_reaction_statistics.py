"""Unit tests for the reaction statistics use cases."""

from uuid import uuid4

from dishka import AsyncContainer
import pytest

from engage.application.usecase.reaction import (
    IntensityAnalysisUseCase,
    ReactionBreakdownUseCase,
    ReactionStatisticsRequest,
    ReactionSummaryUseCase,
    ReactRequest,
    ReactUseCase,
    TrendingReactionsRequest,
    TrendingReactionsUseCase,
)
from engage.domain.error import ValidationError
from engage.domain.service import AggregationService, ReactionService
from engage.domain.value import ReactionType
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed(unit_env: AsyncContainer, content_id: str) -> str:
    """Four reactions on one content item; returns the first reactor's ID."""
    react = ReactUseCase(reaction_service=await unit_env.get(ReactionService))
    viewer_id = str(uuid4())
    await react.execute(
        ReactRequest(
            actor_id=viewer_id,
            content_id=content_id,
            reaction_type="love",
            intensity=5,
            cohort_level=1,
            cultural_tags=["Bengali"],
        )
    )
    await react.execute(
        ReactRequest(
            actor_id=str(uuid4()),
            content_id=content_id,
            reaction_type="love",
            intensity=3,
            cohort_level=1,
        )
    )
    await react.execute(
        ReactRequest(
            actor_id=str(uuid4()),
            content_id=content_id,
            reaction_type="blessing",
            intensity=4,
            cohort_level=2,
        )
    )
    await react.execute(
        ReactRequest(
            actor_id=str(uuid4()),
            content_id=content_id,
            reaction_type="festival",
            intensity=1,
        )
    )
    return viewer_id


class TestReactionSummaryUseCase:
    """Tests for ReactionSummaryUseCase."""

    @pytest.mark.asyncio
    async def test_summary_includes_viewer_reaction(self, unit_env: AsyncContainer):
        """The summary covers all breakdowns and the viewer's own reaction."""
        # Arrange
        content_id = str(uuid4())
        viewer_id = await _seed(unit_env, content_id)
        use_case = ReactionSummaryUseCase(
            aggregation_service=await unit_env.get(AggregationService)
        )

        # Act
        response = await use_case.execute(
            ReactionStatisticsRequest(content_id=content_id, viewer_id=viewer_id)
        )

        # Assert
        assert response.total_reactions == 4
        assert response.unique_reactors == 4
        assert response.average_intensity == 3.25
        assert response.high_intensity_count == 2
        assert response.low_intensity_count == 1
        assert response.by_type[0].reaction_type == ReactionType.LOVE
        assert response.by_type[0].percentage == 50.0
        assert response.by_category.core_count == 2
        assert response.by_category.family_count == 1
        assert response.by_category.cultural_count == 1
        assert [(c.cohort_level, c.count) for c in response.by_cohort] == [
            (1, 2),
            (2, 1),
            (None, 1),
        ]
        assert [(t.tag, t.percentage) for t in response.by_cultural_tag] == [
            ("Bengali", 25.0)
        ]
        assert response.viewer_reaction is not None
        assert response.viewer_reaction.actor_id == viewer_id

    @pytest.mark.asyncio
    async def test_anonymous_summary_has_no_viewer_reaction(
        self, unit_env: AsyncContainer
    ):
        """Without a viewer there is no own reaction to report."""
        # Arrange
        content_id = str(uuid4())
        await _seed(unit_env, content_id)
        use_case = ReactionSummaryUseCase(
            aggregation_service=await unit_env.get(AggregationService)
        )

        # Act
        response = await use_case.execute(
            ReactionStatisticsRequest(content_id=content_id)
        )

        # Assert
        assert response.viewer_reaction is None


class TestReactionBreakdownUseCase:
    """Tests for ReactionBreakdownUseCase."""

    @pytest.mark.asyncio
    async def test_breakdown_lists_every_intensity(self, unit_env: AsyncContainer):
        """All five intensity buckets are present, including empty ones."""
        # Arrange
        content_id = str(uuid4())
        await _seed(unit_env, content_id)
        use_case = ReactionBreakdownUseCase(
            aggregation_service=await unit_env.get(AggregationService)
        )

        # Act
        response = await use_case.execute(
            ReactionStatisticsRequest(content_id=content_id)
        )

        # Assert
        assert response.total_reactions == 4
        assert [(b.intensity, b.count) for b in response.by_intensity] == [
            (1, 1),
            (2, 0),
            (3, 1),
            (4, 1),
            (5, 1),
        ]


class TestIntensityAnalysisUseCase:
    """Tests for IntensityAnalysisUseCase."""

    @pytest.mark.asyncio
    async def test_intensity_range_and_per_type_means(self, unit_env: AsyncContainer):
        """Min, max and the per-type means are reported."""
        # Arrange
        content_id = str(uuid4())
        await _seed(unit_env, content_id)
        use_case = IntensityAnalysisUseCase(
            aggregation_service=await unit_env.get(AggregationService)
        )

        # Act
        response = await use_case.execute(
            ReactionStatisticsRequest(content_id=content_id)
        )

        # Assert
        assert response.min_intensity == 1
        assert response.max_intensity == 5
        assert response.by_type[0].reaction_type == ReactionType.LOVE
        assert response.by_type[0].average_intensity == 4.0

    @pytest.mark.asyncio
    async def test_no_reactions(self, unit_env: AsyncContainer):
        """Content without reactions has no intensity range."""
        # Arrange
        use_case = IntensityAnalysisUseCase(
            aggregation_service=await unit_env.get(AggregationService)
        )

        # Act
        response = await use_case.execute(
            ReactionStatisticsRequest(content_id=str(uuid4()))
        )

        # Assert
        assert response.total_reactions == 0
        assert response.min_intensity is None
        assert response.max_intensity is None
        assert response.by_type == []


class TestTrendingReactionsUseCase:
    """Tests for TrendingReactionsUseCase."""

    @pytest.mark.asyncio
    async def test_trending_filtered_by_cohort(self, unit_env: AsyncContainer):
        """Only reactions from the requested cohort are counted."""
        # Arrange
        await _seed(unit_env, str(uuid4()))
        await _seed(unit_env, str(uuid4()))
        use_case = TrendingReactionsUseCase(
            aggregation_service=await unit_env.get(AggregationService)
        )

        # Act
        response = await use_case.execute(TrendingReactionsRequest(cohort_level=2))

        # Assert
        assert [(r.reaction_type, r.count) for r in response.reactions] == [
            (ReactionType.BLESSING, 2)
        ]

    @pytest.mark.asyncio
    async def test_trending_rejects_oversized_limit(self, unit_env: AsyncContainer):
        """The limit is capped."""
        # Arrange
        use_case = TrendingReactionsUseCase(
            aggregation_service=await unit_env.get(AggregationService)
        )

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(TrendingReactionsRequest(limit=1000))
