"""Reaction use cases."""

from .get_reactions import (
    GetReactionRequest,
    GetReactionUseCase,
    GetUserReactionRequest,
    GetUserReactionUseCase,
    ListActorReactionsRequest,
    ListActorReactionsUseCase,
    ListContentReactionsRequest,
    ListContentReactionsUseCase,
    ListReactionTypesRequest,
    ListReactionTypesResponse,
    ListReactionTypesUseCase,
)
from .react import ReactRequest, ReactUseCase, UpdateReactionRequest, UpdateReactionUseCase
from .reaction_statistics import (
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
from .remove_reaction import (
    RemoveContentReactionRequest,
    RemoveContentReactionUseCase,
    RemoveReactionRequest,
    RemoveReactionResponse,
    RemoveReactionUseCase,
)

__all__ = [
    "GetReactionRequest",
    "GetReactionUseCase",
    "GetUserReactionRequest",
    "GetUserReactionUseCase",
    "IntensityAnalysisResponse",
    "IntensityAnalysisUseCase",
    "ListActorReactionsRequest",
    "ListActorReactionsUseCase",
    "ListContentReactionsRequest",
    "ListContentReactionsUseCase",
    "ListReactionTypesRequest",
    "ListReactionTypesResponse",
    "ListReactionTypesUseCase",
    "ReactRequest",
    "ReactUseCase",
    "ReactionBreakdownResponse",
    "ReactionBreakdownUseCase",
    "ReactionStatisticsRequest",
    "ReactionSummaryResponse",
    "ReactionSummaryUseCase",
    "RemoveContentReactionRequest",
    "RemoveContentReactionUseCase",
    "RemoveReactionRequest",
    "RemoveReactionResponse",
    "RemoveReactionUseCase",
    "TrendingReactionsRequest",
    "TrendingReactionsResponse",
    "TrendingReactionsUseCase",
    "UpdateReactionRequest",
    "UpdateReactionUseCase",
]
