"""PostgreSQL implementation of Comment repository."""

from typing import Any, List, Optional

from sqlalchemy import Select, func, or_, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from engage.domain.model import Comment
from engage.domain.repository import CommentFilter, CommentRepository
from engage.domain.value import (
    CommentId,
    CommentSortOrder,
    ModerationStatus,
    VisibilityStatus,
)
from engage.persistence.error import store_unavailable_on_connection_error
from engage.persistence.mappers import comment_to_dict, row_to_comment
from engage.persistence.tables import comments_table

# Counters are repaired by dedicated statements, never by a plain save
_COUNTER_COLUMNS = {"reply_count", "like_count"}

_PUBLIC_STATUSES = [s.value for s in ModerationStatus.public_statuses()]


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @store_unavailable_on_connection_error
    async def find_by_id(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    @store_unavailable_on_connection_error
    async def find_all(
        self,
        criteria: CommentFilter,
        sort: CommentSortOrder = CommentSortOrder.RECENT,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments matching the criteria."""
        stmt = self._apply_filter(select(comments_table), criteria)

        if sort == CommentSortOrder.OLDEST:
            stmt = stmt.order_by(comments_table.c.created_at, comments_table.c.id)
        elif sort == CommentSortOrder.TOP:
            stmt = stmt.order_by(
                comments_table.c.like_count.desc(),
                comments_table.c.created_at.desc(),
                comments_table.c.id.desc(),
            )
        else:
            stmt = stmt.order_by(
                comments_table.c.created_at.desc(), comments_table.c.id.desc()
            )

        if limit is not None:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    @store_unavailable_on_connection_error
    async def count(self, criteria: CommentFilter) -> int:
        """Count comments matching the criteria."""
        stmt = self._apply_filter(
            select(func.count()).select_from(comments_table), criteria
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    @store_unavailable_on_connection_error
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        stmt = pg_insert(comments_table).values(**comment_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[comments_table.c.id],
            set_={
                key: stmt.excluded[key]
                for key in comment_dict
                if key not in _COUNTER_COLUMNS and key != "id"
            },
        ).returning(comments_table)

        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else comment

    @store_unavailable_on_connection_error
    async def refresh_reply_count(self, parent_id: CommentId) -> int:
        """Recompute reply_count from live children in a single statement."""
        child = comments_table.alias("child")
        live_children = (
            select(func.count())
            .select_from(child)
            .where(child.c.parent_id == parent_id)
            .where(child.c.visibility_status == VisibilityStatus.ACTIVE.value)
            .scalar_subquery()
        )
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == parent_id)
            .values(reply_count=live_children)
            .returning(comments_table.c.reply_count)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        reply_count = result.scalar()
        return reply_count or 0

    @store_unavailable_on_connection_error
    async def set_like_count(self, comment_id: CommentId, like_count: int) -> None:
        """Store a freshly counted like_count."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(like_count=like_count)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    def _apply_filter(self, stmt: Select[Any], criteria: CommentFilter) -> Select[Any]:
        """Translate filter criteria into WHERE clauses."""
        c = comments_table.c

        if not criteria.include_deleted:
            stmt = stmt.where(c.visibility_status == VisibilityStatus.ACTIVE.value)
        if criteria.content_id is not None:
            stmt = stmt.where(c.content_id == criteria.content_id)
        if criteria.parent_id is not None:
            stmt = stmt.where(c.parent_id == criteria.parent_id)
        if criteria.top_level_only:
            stmt = stmt.where(c.parent_id.is_(None))
        if criteria.author_id is not None:
            stmt = stmt.where(c.author_id == criteria.author_id)
        if criteria.hashtag is not None:
            stmt = stmt.where(c.hashtags.contains([criteria.hashtag]))
        if criteria.cultural_tag is not None:
            stmt = stmt.where(c.cultural_tags.contains([criteria.cultural_tag]))
        if criteria.cohort_level is not None:
            stmt = stmt.where(c.cohort_level == criteria.cohort_level)
        if criteria.text_query is not None:
            pattern = f"%{_escape_like(criteria.text_query)}%"
            stmt = stmt.where(c.text.ilike(pattern, escape="\\"))
        if criteria.moderation_statuses is not None:
            stmt = stmt.where(
                c.moderation_status.in_([s.value for s in criteria.moderation_statuses])
            )
        if criteria.created_since is not None:
            stmt = stmt.where(c.created_at >= criteria.created_since)
        if criteria.public_only:
            stmt = stmt.where(c.moderation_status.in_(_PUBLIC_STATUSES))

        viewer = criteria.visible_to
        if viewer is not None and not viewer.is_moderator:
            stmt = stmt.where(
                or_(
                    c.moderation_status.in_(_PUBLIC_STATUSES),
                    c.author_id == viewer.id,
                )
            )
        return stmt
