"""Engagement statistics.

Read-only projections computed on demand from live records. Nothing here is
persisted; every value reflects the store at the moment it was computed.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from engage.domain.model.common import DomainModel, utcnow
from engage.domain.model.reaction import Reaction
from engage.domain.value import (
    ActorId,
    ContentId,
    IntensityLevel,
    ReactionCategory,
    ReactionType,
)


class TypeCount(DomainModel):
    """Reactions of one type."""

    reaction_type: ReactionType
    display_name: str
    icon: str
    color: str
    category: ReactionCategory
    count: int
    percentage: float


class IntensityBucket(DomainModel):
    """Reactions at one intensity value."""

    intensity: int
    description: str
    level: IntensityLevel
    count: int
    percentage: float


class CohortCount(DomainModel):
    """Reactions from one cohort level (None groups untagged reactions)."""

    cohort_level: Optional[int]
    count: int
    percentage: float


class TagCount(DomainModel):
    """Occurrences of one tag."""

    tag: str
    count: int
    percentage: float


class CategoryBreakdown(DomainModel):
    """Reaction counts per taxonomy category."""

    core_count: int = 0
    family_count: int = 0
    generational_count: int = 0
    cultural_count: int = 0
    core_percentage: float = 0.0
    family_percentage: float = 0.0
    generational_percentage: float = 0.0
    cultural_percentage: float = 0.0


class ReactionSummary(DomainModel):
    """Full reaction summary for a content item."""

    content_id: ContentId
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
    viewer_reaction: Optional[Reaction] = None
    computed_at: datetime = Field(default_factory=utcnow)


class ReactionBreakdown(DomainModel):
    """Reaction counts per type, intensity and cohort."""

    content_id: ContentId
    total_reactions: int
    by_type: list[TypeCount]
    by_intensity: list[IntensityBucket]
    by_cohort: list[CohortCount]


class TypeIntensity(DomainModel):
    """Mean intensity of one reaction type."""

    reaction_type: ReactionType
    count: int
    average_intensity: float


class IntensityAnalysis(DomainModel):
    """Intensity statistics for a content item."""

    content_id: ContentId
    total_reactions: int
    average_intensity: float
    min_intensity: Optional[int] = None
    max_intensity: Optional[int] = None
    distribution: list[IntensityBucket]
    by_type: list[TypeIntensity]


class HashtagTrend(DomainModel):
    """Hashtag usage within a trailing window."""

    hashtag: str
    count: int
    last_used_at: datetime


class ReactionTrend(DomainModel):
    """Reaction type usage within a trailing window."""

    reaction_type: ReactionType
    display_name: str
    icon: str
    count: int
    last_reacted_at: datetime


class MentionCount(DomainModel):
    """Times an actor was mentioned."""

    actor_id: ActorId
    count: int


class CommentStatistics(DomainModel):
    """Comment activity for a content item."""

    content_id: ContentId
    total_comments: int
    total_replies: int
    total_likes: int
    average_sentiment: float
    window_days: int
    top_hashtags: list[TagCount]
    top_mentions: list[MentionCount]
    computed_at: datetime = Field(default_factory=utcnow)
