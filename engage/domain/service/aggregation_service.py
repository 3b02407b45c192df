"""Engagement aggregation service.

Computes reaction and comment statistics from the live records on every
call. Nothing is cached, so results are always consistent with the store at
read time.
"""

from collections import Counter, defaultdict
from datetime import datetime, timedelta
from typing import Iterable, Optional

import logfire

from engage.config import AggregationSettings
from engage.domain.model import (
    CategoryBreakdown,
    CohortCount,
    Comment,
    CommentStatistics,
    HashtagTrend,
    IntensityAnalysis,
    IntensityBucket,
    MentionCount,
    Reaction,
    ReactionBreakdown,
    ReactionSummary,
    ReactionTrend,
    TagCount,
    TypeCount,
    TypeIntensity,
)
from engage.domain.model.common import utcnow
from engage.domain.repository import (
    CommentFilter,
    CommentRepository,
    ReactionRepository,
)
from engage.domain.value import (
    INTENSITY_DESCRIPTIONS,
    MAX_INTENSITY,
    MIN_INTENSITY,
    ActorId,
    CommentSortOrder,
    ContentId,
    IntensityLevel,
    ReactionCategory,
    ReactionType,
)

from .base import Service
from .validation import check_cohort_level, check_window

_TAXONOMY_ORDER = {t: i for i, t in enumerate(ReactionType)}


def percentage(count: int, total: int) -> float:
    """Share of ``count`` in ``total`` as a percentage, 0.0 for an empty total."""
    if total == 0:
        return 0.0
    return round(count / total * 100, 2)


def mean(values: list[float] | list[int]) -> float:
    if not values:
        return 0.0
    return round(sum(values) / len(values), 2)


def _rank_recent(
    counts: Counter, last_seen: dict, limit: int
) -> list[tuple[object, int, datetime]]:
    """Order keys by count desc, then most recent use, then key."""
    ranked = sorted(
        counts,
        key=lambda key: (-counts[key], -last_seen[key].timestamp(), str(key)),
    )
    return [(key, counts[key], last_seen[key]) for key in ranked[:limit]]


class AggregationService(Service):
    """Domain service for engagement statistics."""

    def __init__(
        self,
        reaction_repository: ReactionRepository,
        comment_repository: CommentRepository,
        aggregation_settings: AggregationSettings,
    ) -> None:
        """Initialize aggregation service.

        Args:
            reaction_repository: Reaction repository
            comment_repository: Comment repository
            aggregation_settings: Default windows and limits
        """
        self.reaction_repository = reaction_repository
        self.comment_repository = comment_repository
        self.settings = aggregation_settings

    async def reaction_summary(
        self, content_id: ContentId, viewer_id: Optional[ActorId] = None
    ) -> ReactionSummary:
        """Full reaction summary for a content item.

        Args:
            content_id: Content item ID
            viewer_id: When set, the viewer's own reaction is included

        Returns:
            Reaction summary with type, category, intensity, cohort and
            cultural tag breakdowns
        """
        with logfire.span(
            "aggregation_service.reaction_summary", content_id=str(content_id)
        ):
            reactions = await self.reaction_repository.find_by_content(content_id)
            total = len(reactions)
            levels = Counter(IntensityLevel.of(r.intensity) for r in reactions)

            viewer_reaction = None
            if viewer_id is not None:
                viewer_reaction = next(
                    (r for r in reactions if r.actor_id == viewer_id), None
                )

            return ReactionSummary(
                content_id=content_id,
                total_reactions=total,
                unique_reactors=len({r.actor_id for r in reactions}),
                average_intensity=mean([r.intensity for r in reactions]),
                high_intensity_count=levels[IntensityLevel.HIGH],
                low_intensity_count=levels[IntensityLevel.LOW],
                by_type=self._by_type(reactions),
                by_category=self._by_category(reactions),
                by_intensity=self._by_intensity(reactions),
                by_cohort=self._by_cohort(reactions),
                by_cultural_tag=self._by_cultural_tag(reactions),
                viewer_reaction=viewer_reaction,
            )

    async def reaction_breakdown(self, content_id: ContentId) -> ReactionBreakdown:
        """Reaction counts per type, intensity and cohort for a content item."""
        with logfire.span(
            "aggregation_service.reaction_breakdown", content_id=str(content_id)
        ):
            reactions = await self.reaction_repository.find_by_content(content_id)
            return ReactionBreakdown(
                content_id=content_id,
                total_reactions=len(reactions),
                by_type=self._by_type(reactions),
                by_intensity=self._by_intensity(reactions),
                by_cohort=self._by_cohort(reactions),
            )

    async def intensity_analysis(self, content_id: ContentId) -> IntensityAnalysis:
        """Intensity statistics for a content item.

        Returns:
            Mean, min, max and distribution of intensity, plus the mean
            intensity of every reaction type present
        """
        with logfire.span(
            "aggregation_service.intensity_analysis", content_id=str(content_id)
        ):
            reactions = await self.reaction_repository.find_by_content(content_id)
            intensities = [r.intensity for r in reactions]

            per_type: dict[ReactionType, list[int]] = defaultdict(list)
            for reaction in reactions:
                per_type[reaction.reaction_type].append(reaction.intensity)

            by_type = [
                TypeIntensity(
                    reaction_type=reaction_type,
                    count=len(values),
                    average_intensity=mean(values),
                )
                for reaction_type, values in per_type.items()
            ]
            by_type.sort(key=lambda t: (-t.count, _TAXONOMY_ORDER[t.reaction_type]))

            return IntensityAnalysis(
                content_id=content_id,
                total_reactions=len(reactions),
                average_intensity=mean(intensities),
                min_intensity=min(intensities) if intensities else None,
                max_intensity=max(intensities) if intensities else None,
                distribution=self._by_intensity(reactions),
                by_type=by_type,
            )

    async def trending_hashtags(
        self, window_days: Optional[int] = None, limit: Optional[int] = None
    ) -> list[HashtagTrend]:
        """Most used hashtags on publicly visible comments within a window.

        Args:
            window_days: Trailing window in days (1-365), default from settings
            limit: Maximum hashtags to return (1-100), default from settings

        Returns:
            Hashtags ordered by count desc, ties broken by most recent use

        Raises:
            ValidationError: If window_days or limit is out of range
        """
        if window_days is None:
            window_days = self.settings.trending_window_days
        if limit is None:
            limit = self.settings.top_limit
        check_window(window_days, limit)

        with logfire.span(
            "aggregation_service.trending_hashtags",
            window_days=window_days,
            limit=limit,
        ):
            comments = await self._recent_public_comments(window_days)
            counts, last_seen = self._tally_hashtags(comments)
            return [
                HashtagTrend(hashtag=tag, count=count, last_used_at=last)
                for tag, count, last in _rank_recent(counts, last_seen, limit)
            ]

    async def trending_reactions(
        self,
        cohort_level: Optional[int] = None,
        window_days: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> list[ReactionTrend]:
        """Most used reaction types within a window.

        Args:
            cohort_level: Only count reactions from this cohort level
            window_days: Trailing window in days (1-365), default from settings
            limit: Maximum types to return (1-100), default from settings

        Returns:
            Reaction types ordered by count desc, ties broken by most recent use

        Raises:
            ValidationError: If window_days, limit or cohort_level is invalid
        """
        if window_days is None:
            window_days = self.settings.trending_window_days
        if limit is None:
            limit = self.settings.top_limit
        check_window(window_days, limit)
        check_cohort_level(cohort_level)

        with logfire.span(
            "aggregation_service.trending_reactions",
            window_days=window_days,
            limit=limit,
            cohort_level=cohort_level,
        ):
            since = utcnow() - timedelta(days=window_days)
            reactions = await self.reaction_repository.find_since(since, cohort_level)

            counts: Counter = Counter()
            last_seen: dict[ReactionType, datetime] = {}
            for reaction in reactions:
                counts[reaction.reaction_type] += 1
                seen = last_seen.get(reaction.reaction_type)
                if seen is None or reaction.updated_at > seen:
                    last_seen[reaction.reaction_type] = reaction.updated_at

            return [
                ReactionTrend(
                    reaction_type=reaction_type,
                    display_name=reaction_type.display_name,
                    icon=reaction_type.icon,
                    count=count,
                    last_reacted_at=last,
                )
                for reaction_type, count, last in _rank_recent(
                    counts, last_seen, limit
                )
            ]

    async def comment_statistics(self, content_id: ContentId) -> CommentStatistics:
        """Comment activity for a content item.

        Totals cover every live, publicly visible comment. Top hashtags and
        mentions are limited to the configured statistics window.
        """
        window_days = self.settings.statistics_window_days
        with logfire.span(
            "aggregation_service.comment_statistics",
            content_id=str(content_id),
            window_days=window_days,
        ):
            comments = await self.comment_repository.find_all(
                CommentFilter(content_id=content_id, public_only=True),
                sort=CommentSortOrder.OLDEST,
            )
            since = utcnow() - timedelta(days=window_days)
            recent = [c for c in comments if c.created_at >= since]

            hashtag_counts, _ = self._tally_hashtags(recent)
            hashtag_total = sum(hashtag_counts.values())
            top_hashtags = [
                TagCount(
                    tag=tag,
                    count=count,
                    percentage=percentage(count, hashtag_total),
                )
                for tag, count in sorted(
                    hashtag_counts.items(), key=lambda item: (-item[1], item[0])
                )[: self.settings.top_limit]
            ]

            mention_counts: Counter = Counter(
                mention for c in recent for mention in c.mentions
            )
            top_mentions = [
                MentionCount(actor_id=actor_id, count=count)
                for actor_id, count in sorted(
                    mention_counts.items(), key=lambda item: (-item[1], str(item[0]))
                )[: self.settings.top_limit]
            ]

            sentiments = [
                c.sentiment_score for c in comments if c.sentiment_score is not None
            ]

            return CommentStatistics(
                content_id=content_id,
                total_comments=len(comments),
                total_replies=sum(1 for c in comments if c.parent_id is not None),
                total_likes=sum(c.like_count for c in comments),
                average_sentiment=mean(sentiments),
                window_days=window_days,
                top_hashtags=top_hashtags,
                top_mentions=top_mentions,
            )

    async def _recent_public_comments(self, window_days: int) -> list[Comment]:
        since = utcnow() - timedelta(days=window_days)
        return await self.comment_repository.find_all(
            CommentFilter(public_only=True, created_since=since),
            sort=CommentSortOrder.RECENT,
        )

    @staticmethod
    def _tally_hashtags(
        comments: Iterable[Comment],
    ) -> tuple[Counter, dict[str, datetime]]:
        counts: Counter = Counter()
        last_seen: dict[str, datetime] = {}
        for comment in comments:
            for tag in comment.hashtags:
                counts[tag] += 1
                seen = last_seen.get(tag)
                if seen is None or comment.created_at > seen:
                    last_seen[tag] = comment.created_at
        return counts, last_seen

    @staticmethod
    def _by_type(reactions: list[Reaction]) -> list[TypeCount]:
        total = len(reactions)
        counts = Counter(r.reaction_type for r in reactions)
        ordered = sorted(counts, key=lambda t: (-counts[t], _TAXONOMY_ORDER[t]))
        return [
            TypeCount(
                reaction_type=t,
                display_name=t.display_name,
                icon=t.icon,
                color=t.color,
                category=t.category,
                count=counts[t],
                percentage=percentage(counts[t], total),
            )
            for t in ordered
        ]

    @staticmethod
    def _by_category(reactions: list[Reaction]) -> CategoryBreakdown:
        total = len(reactions)
        counts = Counter(r.reaction_type.category for r in reactions)
        core = counts[ReactionCategory.CORE]
        family = counts[ReactionCategory.FAMILY]
        generational = counts[ReactionCategory.GENERATIONAL]
        cultural = counts[ReactionCategory.CULTURAL]
        return CategoryBreakdown(
            core_count=core,
            family_count=family,
            generational_count=generational,
            cultural_count=cultural,
            core_percentage=percentage(core, total),
            family_percentage=percentage(family, total),
            generational_percentage=percentage(generational, total),
            cultural_percentage=percentage(cultural, total),
        )

    @staticmethod
    def _by_intensity(reactions: list[Reaction]) -> list[IntensityBucket]:
        total = len(reactions)
        counts = Counter(r.intensity for r in reactions)
        return [
            IntensityBucket(
                intensity=value,
                description=INTENSITY_DESCRIPTIONS[value],
                level=IntensityLevel.of(value),
                count=counts[value],
                percentage=percentage(counts[value], total),
            )
            for value in range(MIN_INTENSITY, MAX_INTENSITY + 1)
        ]

    @staticmethod
    def _by_cohort(reactions: list[Reaction]) -> list[CohortCount]:
        total = len(reactions)
        counts = Counter(r.cohort_level for r in reactions)
        ordered = sorted(
            counts,
            key=lambda level: (-counts[level], level is None, level or 0),
        )
        return [
            CohortCount(
                cohort_level=level,
                count=counts[level],
                percentage=percentage(counts[level], total),
            )
            for level in ordered
        ]

    @staticmethod
    def _by_cultural_tag(reactions: list[Reaction]) -> list[TagCount]:
        total = len(reactions)
        counts = Counter(tag for r in reactions for tag in r.cultural_tags)
        return [
            TagCount(tag=tag, count=count, percentage=percentage(count, total))
            for tag, count in sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        ]
