"""Engagement statistics routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from engage.application.usecase.comment import (
    CommentStatisticsRequest,
    CommentStatisticsResponse,
    CommentStatisticsUseCase,
    TrendingHashtagsRequest,
    TrendingHashtagsResponse,
    TrendingHashtagsUseCase,
)
from engage.application.usecase.reaction import (
    IntensityAnalysisResponse,
    IntensityAnalysisUseCase,
    ReactionBreakdownResponse,
    ReactionBreakdownUseCase,
    ReactionStatisticsRequest,
    ReactionSummaryResponse,
    ReactionSummaryUseCase,
    TrendingReactionsRequest,
    TrendingReactionsResponse,
    TrendingReactionsUseCase,
)
from engage.interface.api.routes.actor import ActorHeaders, actor_headers

router = APIRouter(tags=["statistics"], route_class=DishkaRoute)


@router.get(
    "/contents/{content_id}/reactions/summary", response_model=ReactionSummaryResponse
)
async def reaction_summary(
    content_id: str,
    summary_use_case: FromDishka[ReactionSummaryUseCase],
    viewer: ActorHeaders = Depends(actor_headers),
) -> ReactionSummaryResponse:
    """Reaction summary for a content item.

    Includes type, category, intensity, cohort and cultural tag breakdowns,
    plus the caller's own reaction when X-Actor-Id is sent.

    Args:
        content_id: Content item UUID
        summary_use_case: Reaction summary use case from DI
        viewer: Caller identity (optional)

    Returns:
        Reaction summary computed from live reactions
    """
    return await summary_use_case.execute(
        ReactionStatisticsRequest(content_id=content_id, **viewer.as_viewer())
    )


@router.get(
    "/contents/{content_id}/reactions/breakdown",
    response_model=ReactionBreakdownResponse,
)
async def reaction_breakdown(
    content_id: str,
    breakdown_use_case: FromDishka[ReactionBreakdownUseCase],
) -> ReactionBreakdownResponse:
    """Reaction counts per type, intensity and cohort."""
    return await breakdown_use_case.execute(
        ReactionStatisticsRequest(content_id=content_id)
    )


@router.get(
    "/contents/{content_id}/reactions/intensity",
    response_model=IntensityAnalysisResponse,
)
async def intensity_analysis(
    content_id: str,
    intensity_use_case: FromDishka[IntensityAnalysisUseCase],
) -> IntensityAnalysisResponse:
    """Mean, min, max and distribution of reaction intensity."""
    return await intensity_use_case.execute(
        ReactionStatisticsRequest(content_id=content_id)
    )


@router.get(
    "/contents/{content_id}/comments/statistics",
    response_model=CommentStatisticsResponse,
)
async def comment_statistics(
    content_id: str,
    statistics_use_case: FromDishka[CommentStatisticsUseCase],
) -> CommentStatisticsResponse:
    """Comment activity on a content item."""
    return await statistics_use_case.execute(
        CommentStatisticsRequest(content_id=content_id)
    )


@router.get("/trending/hashtags", response_model=TrendingHashtagsResponse)
async def trending_hashtags(
    trending_use_case: FromDishka[TrendingHashtagsUseCase],
    window_days: int | None = None,
    limit: int | None = None,
) -> TrendingHashtagsResponse:
    """Most used hashtags on public comments within a trailing window."""
    return await trending_use_case.execute(
        TrendingHashtagsRequest(window_days=window_days, limit=limit)
    )


@router.get("/trending/reactions", response_model=TrendingReactionsResponse)
async def trending_reactions(
    trending_use_case: FromDishka[TrendingReactionsUseCase],
    cohort_level: int | None = None,
    window_days: int | None = None,
    limit: int | None = None,
) -> TrendingReactionsResponse:
    """Most used reaction types within a trailing window."""
    return await trending_use_case.execute(
        TrendingReactionsRequest(
            cohort_level=cohort_level, window_days=window_days, limit=limit
        )
    )
