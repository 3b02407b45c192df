"""In-memory comment repository for testing."""

from typing import List, Optional

from engage.domain.model import Comment
from engage.domain.repository import CommentFilter, CommentRepository
from engage.domain.value import CommentId, CommentSortOrder


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Methods that read-modify-write do so without awaiting in between, so
    concurrent coroutines on one event loop see the same guarantees a row
    lock gives in PostgreSQL.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_all(
        self,
        criteria: CommentFilter,
        sort: CommentSortOrder = CommentSortOrder.RECENT,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments matching the criteria."""
        matches = [c for c in self._comments.values() if self._matches(c, criteria)]

        if sort == CommentSortOrder.OLDEST:
            matches.sort(key=lambda c: (c.created_at, c.id))
        elif sort == CommentSortOrder.TOP:
            matches.sort(key=lambda c: (c.like_count, c.created_at, c.id), reverse=True)
        else:
            matches.sort(key=lambda c: (c.created_at, c.id), reverse=True)

        if limit is None:
            return matches[offset:]
        return matches[offset : offset + limit]

    async def count(self, criteria: CommentFilter) -> int:
        """Count comments matching the criteria."""
        return sum(1 for c in self._comments.values() if self._matches(c, criteria))

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Counters of an existing comment are kept as stored.
        """
        existing = self._comments.get(comment.id)
        if existing is not None:
            comment = comment.model_copy(
                update={
                    "reply_count": existing.reply_count,
                    "like_count": existing.like_count,
                }
            )
        self._comments[comment.id] = comment
        return comment

    async def refresh_reply_count(self, parent_id: CommentId) -> int:
        """Recompute reply_count from live children."""
        parent = self._comments.get(parent_id)
        reply_count = sum(
            1
            for c in self._comments.values()
            if c.parent_id == parent_id and not c.is_deleted
        )
        if parent is not None:
            self._comments[parent_id] = parent.model_copy(
                update={"reply_count": reply_count}
            )
        return reply_count

    async def set_like_count(self, comment_id: CommentId, like_count: int) -> None:
        """Store a freshly counted like_count."""
        comment = self._comments.get(comment_id)
        if comment is not None:
            self._comments[comment_id] = comment.model_copy(
                update={"like_count": like_count}
            )

    @staticmethod
    def _matches(comment: Comment, criteria: CommentFilter) -> bool:
        if not criteria.include_deleted and comment.is_deleted:
            return False
        if criteria.content_id is not None and comment.content_id != criteria.content_id:
            return False
        if criteria.parent_id is not None and comment.parent_id != criteria.parent_id:
            return False
        if criteria.top_level_only and comment.parent_id is not None:
            return False
        if criteria.author_id is not None and comment.author_id != criteria.author_id:
            return False
        if criteria.hashtag is not None and criteria.hashtag not in comment.hashtags:
            return False
        if (
            criteria.cultural_tag is not None
            and criteria.cultural_tag not in comment.cultural_tags
        ):
            return False
        if (
            criteria.cohort_level is not None
            and comment.cohort_level != criteria.cohort_level
        ):
            return False
        if (
            criteria.text_query is not None
            and criteria.text_query.casefold() not in comment.text.casefold()
        ):
            return False
        if (
            criteria.moderation_statuses is not None
            and comment.moderation_status not in criteria.moderation_statuses
        ):
            return False
        if (
            criteria.created_since is not None
            and comment.created_at < criteria.created_since
        ):
            return False
        if criteria.public_only and not comment.moderation_status.is_public:
            return False
        if criteria.visible_to is not None and not comment.is_visible_to(
            criteria.visible_to
        ):
            return False
        return True
