"""Reaction statistics use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from engage.application.usecase.common import ReactionItem, ViewerRequest
from engage.domain.model import (
    CategoryBreakdown,
    CohortCount,
    IntensityBucket,
    ReactionTrend,
    TagCount,
    TypeCount,
    TypeIntensity,
)
from engage.domain.service import AggregationService
from engage.domain.value import ContentId


class ReactionStatisticsRequest(ViewerRequest):
    """Request for statistics about one content item."""

    content_id: str  # UUID string


class ReactionSummaryResponse(BaseModel):
    """Reaction summary response."""

    content_id: str
    total_reactions: int
    unique_reactors: int
    average_intensity: float
    high_intensity_count: int
    low_intensity_count: int
    by_type: list[TypeCount]
    by_category: CategoryBreakdown
    by_intensity: list[IntensityBucket]
    by_cohort: list[CohortCount]
    by_cultural_tag: list[TagCount]
    viewer_reaction: ReactionItem | None
    computed_at: datetime


class ReactionBreakdownResponse(BaseModel):
    """Reaction breakdown response."""

    content_id: str
    total_reactions: int
    by_type: list[TypeCount]
    by_intensity: list[IntensityBucket]
    by_cohort: list[CohortCount]


class IntensityAnalysisResponse(BaseModel):
    """Intensity analysis response."""

    content_id: str
    total_reactions: int
    average_intensity: float
    min_intensity: int | None
    max_intensity: int | None
    distribution: list[IntensityBucket]
    by_type: list[TypeIntensity]


class TrendingReactionsRequest(BaseModel):
    """Trending reactions request. Omitted values use the configured defaults."""

    cohort_level: int | None = None
    window_days: int | None = None
    limit: int | None = None


class TrendingReactionsResponse(BaseModel):
    """Trending reactions response."""

    reactions: list[ReactionTrend]


class ReactionSummaryUseCase:
    """Use case for the full reaction summary of a content item."""

    def __init__(self, aggregation_service: AggregationService) -> None:
        """Initialize reaction summary use case.

        Args:
            aggregation_service: Aggregation domain service
        """
        self.aggregation_service = aggregation_service

    async def execute(self, request: ReactionStatisticsRequest) -> ReactionSummaryResponse:
        """Execute reaction summary flow.

        Args:
            request: Content ID and optional viewer

        Returns:
            Summary with all breakdowns, plus the viewer's own reaction when
            the viewer is known
        """
        viewer = request.viewer()
        summary = await self.aggregation_service.reaction_summary(
            ContentId(UUID(request.content_id)),
            viewer_id=viewer.id if viewer else None,
        )
        return ReactionSummaryResponse(
            content_id=str(summary.content_id),
            total_reactions=summary.total_reactions,
            unique_reactors=summary.unique_reactors,
            average_intensity=summary.average_intensity,
            high_intensity_count=summary.high_intensity_count,
            low_intensity_count=summary.low_intensity_count,
            by_type=summary.by_type,
            by_category=summary.by_category,
            by_intensity=summary.by_intensity,
            by_cohort=summary.by_cohort,
            by_cultural_tag=summary.by_cultural_tag,
            viewer_reaction=(
                ReactionItem.from_reaction(summary.viewer_reaction, viewer)
                if summary.viewer_reaction
                else None
            ),
            computed_at=summary.computed_at,
        )


class ReactionBreakdownUseCase:
    """Use case for per-type, per-intensity and per-cohort reaction counts."""

    def __init__(self, aggregation_service: AggregationService) -> None:
        """Initialize reaction breakdown use case.

        Args:
            aggregation_service: Aggregation domain service
        """
        self.aggregation_service = aggregation_service

    async def execute(
        self, request: ReactionStatisticsRequest
    ) -> ReactionBreakdownResponse:
        breakdown = await self.aggregation_service.reaction_breakdown(
            ContentId(UUID(request.content_id))
        )
        return ReactionBreakdownResponse(
            content_id=str(breakdown.content_id),
            total_reactions=breakdown.total_reactions,
            by_type=breakdown.by_type,
            by_intensity=breakdown.by_intensity,
            by_cohort=breakdown.by_cohort,
        )


class IntensityAnalysisUseCase:
    """Use case for reaction intensity statistics."""

    def __init__(self, aggregation_service: AggregationService) -> None:
        """Initialize intensity analysis use case.

        Args:
            aggregation_service: Aggregation domain service
        """
        self.aggregation_service = aggregation_service

    async def execute(
        self, request: ReactionStatisticsRequest
    ) -> IntensityAnalysisResponse:
        analysis = await self.aggregation_service.intensity_analysis(
            ContentId(UUID(request.content_id))
        )
        return IntensityAnalysisResponse(
            content_id=str(analysis.content_id),
            total_reactions=analysis.total_reactions,
            average_intensity=analysis.average_intensity,
            min_intensity=analysis.min_intensity,
            max_intensity=analysis.max_intensity,
            distribution=analysis.distribution,
            by_type=analysis.by_type,
        )


class TrendingReactionsUseCase:
    """Use case for reaction types trending across all content."""

    def __init__(self, aggregation_service: AggregationService) -> None:
        """Initialize trending reactions use case.

        Args:
            aggregation_service: Aggregation domain service
        """
        self.aggregation_service = aggregation_service

    async def execute(self, request: TrendingReactionsRequest) -> TrendingReactionsResponse:
        """Execute trending reactions flow.

        Raises:
            ValidationError: If window_days, limit or cohort_level is invalid
        """
        reactions = await self.aggregation_service.trending_reactions(
            cohort_level=request.cohort_level,
            window_days=request.window_days,
            limit=request.limit,
        )
        return TrendingReactionsResponse(reactions=reactions)
