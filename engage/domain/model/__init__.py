"""Domain model entities for engagement."""

from engage.domain.model.comment import Comment, CommentThread
from engage.domain.model.reaction import Reaction
from engage.domain.model.statistics import (
    CategoryBreakdown,
    CohortCount,
    CommentStatistics,
    HashtagTrend,
    IntensityAnalysis,
    IntensityBucket,
    MentionCount,
    ReactionBreakdown,
    ReactionSummary,
    ReactionTrend,
    TagCount,
    TypeCount,
    TypeIntensity,
)

__all__ = [
    "Comment",
    "CommentThread",
    "Reaction",
    # Statistics
    "CategoryBreakdown",
    "CohortCount",
    "CommentStatistics",
    "HashtagTrend",
    "IntensityAnalysis",
    "IntensityBucket",
    "MentionCount",
    "ReactionBreakdown",
    "ReactionSummary",
    "ReactionTrend",
    "TagCount",
    "TypeCount",
    "TypeIntensity",
]
