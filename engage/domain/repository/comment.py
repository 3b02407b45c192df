"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from engage.domain.model import Comment
from engage.domain.value import (
    Actor,
    ActorId,
    CommentId,
    CommentSortOrder,
    ContentId,
    ModerationStatus,
)
from engage.domain.value.common import ValueObject


class CommentFilter(ValueObject):
    """Criteria for comment queries.

    All set criteria are combined with AND. ``visible_to`` applies the
    moderation visibility policy for that viewer; when it is None no
    visibility restriction is applied (internal callers only).
    """

    content_id: Optional[ContentId] = None
    parent_id: Optional[CommentId] = None
    top_level_only: bool = False
    author_id: Optional[ActorId] = None
    hashtag: Optional[str] = None
    cultural_tag: Optional[str] = None
    cohort_level: Optional[int] = None
    text_query: Optional[str] = None
    moderation_statuses: Optional[frozenset[ModerationStatus]] = None
    created_since: Optional[datetime] = None
    include_deleted: bool = False
    visible_to: Optional[Actor] = None
    public_only: bool = False


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID, including soft-deleted comments.

        Args:
            comment_id: The comment's unique identifier
            for_update: Lock the row for the rest of the transaction

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        criteria: CommentFilter,
        sort: CommentSortOrder = CommentSortOrder.RECENT,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments matching the criteria.

        Args:
            criteria: Filter criteria
            sort: Sort order (ties broken by id)
            limit: Maximum number of results (None for all)
            offset: Number of results to skip

        Returns:
            Matching comments in the requested order
        """
        pass

    @abstractmethod
    async def count(self, criteria: CommentFilter) -> int:
        """Count comments matching the criteria.

        Args:
            criteria: Filter criteria

        Returns:
            Number of matching comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        reply_count and like_count are only written on create; afterwards
        they change through refresh_reply_count and set_like_count.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def refresh_reply_count(self, parent_id: CommentId) -> int:
        """Recompute a comment's reply_count from its live direct children.

        Args:
            parent_id: The parent comment's ID

        Returns:
            The repaired reply count
        """
        pass

    @abstractmethod
    async def set_like_count(self, comment_id: CommentId, like_count: int) -> None:
        """Store a freshly counted like_count.

        Args:
            comment_id: The comment's ID
            like_count: Live number of LIKE reactions on the comment
        """
        pass
