"""PostgreSQL implementation of Reaction repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, delete, func, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from engage.domain.model import Reaction
from engage.domain.repository import ReactionRepository
from engage.domain.value import ActorId, ContentId, ReactionId, ReactionType
from engage.persistence.error import store_unavailable_on_connection_error
from engage.persistence.mappers import reaction_to_dict, row_to_reaction
from engage.persistence.tables import reactions_table


class PostgresReactionRepository(ReactionRepository):
    """PostgreSQL implementation of ReactionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @store_unavailable_on_connection_error
    async def upsert(self, reaction: Reaction) -> Reaction:
        """Insert or replace via INSERT ... ON CONFLICT DO UPDATE."""
        stmt = pg_insert(reactions_table).values(**reaction_to_dict(reaction))
        stmt = stmt.on_conflict_do_update(
            constraint="uq_reactions_content_actor",
            set_={
                "reaction_type": stmt.excluded.reaction_type,
                "intensity": stmt.excluded.intensity,
                "is_anonymous": stmt.excluded.is_anonymous,
                "is_private": stmt.excluded.is_private,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(reactions_table)

        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_reaction(row._asdict()) if row else reaction

    @store_unavailable_on_connection_error
    async def update(self, reaction: Reaction) -> Reaction:
        """Overwrite an existing reaction by ID."""
        stmt = (
            update(reactions_table)
            .where(reactions_table.c.id == reaction.id)
            .values(
                reaction_type=reaction.reaction_type.value,
                intensity=reaction.intensity,
                updated_at=reaction.updated_at,
            )
            .returning(reactions_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_reaction(row._asdict()) if row else reaction

    @store_unavailable_on_connection_error
    async def find_by_id(self, reaction_id: ReactionId) -> Optional[Reaction]:
        """Find a reaction by ID."""
        stmt = select(reactions_table).where(reactions_table.c.id == reaction_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reaction(row._asdict()) if row else None

    @store_unavailable_on_connection_error
    async def find_by_content_and_actor(
        self, content_id: ContentId, actor_id: ActorId
    ) -> Optional[Reaction]:
        """Find an actor's reaction on a content item."""
        stmt = select(reactions_table).where(
            and_(
                reactions_table.c.content_id == content_id,
                reactions_table.c.actor_id == actor_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reaction(row._asdict()) if row else None

    @store_unavailable_on_connection_error
    async def find_by_content(
        self,
        content_id: ContentId,
        reaction_type: Optional[ReactionType] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Reaction]:
        """Find reactions on a content item, newest first."""
        stmt = select(reactions_table).where(reactions_table.c.content_id == content_id)
        if reaction_type is not None:
            stmt = stmt.where(reactions_table.c.reaction_type == reaction_type.value)
        stmt = stmt.order_by(
            reactions_table.c.updated_at.desc(), reactions_table.c.id.desc()
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)

        result = await self.session.execute(stmt)
        return [row_to_reaction(row._asdict()) for row in result.fetchall()]

    @store_unavailable_on_connection_error
    async def count_by_content(
        self, content_id: ContentId, reaction_type: Optional[ReactionType] = None
    ) -> int:
        """Count reactions on a content item."""
        stmt = (
            select(func.count())
            .select_from(reactions_table)
            .where(reactions_table.c.content_id == content_id)
        )
        if reaction_type is not None:
            stmt = stmt.where(reactions_table.c.reaction_type == reaction_type.value)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    @store_unavailable_on_connection_error
    async def find_by_actor(
        self, actor_id: ActorId, limit: Optional[int] = None, offset: int = 0
    ) -> List[Reaction]:
        """Find reactions written by an actor, newest first."""
        stmt = (
            select(reactions_table)
            .where(reactions_table.c.actor_id == actor_id)
            .order_by(reactions_table.c.updated_at.desc(), reactions_table.c.id.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)

        result = await self.session.execute(stmt)
        return [row_to_reaction(row._asdict()) for row in result.fetchall()]

    @store_unavailable_on_connection_error
    async def count_by_actor(self, actor_id: ActorId) -> int:
        """Count reactions written by an actor."""
        stmt = (
            select(func.count())
            .select_from(reactions_table)
            .where(reactions_table.c.actor_id == actor_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    @store_unavailable_on_connection_error
    async def find_since(
        self, since: datetime, cohort_level: Optional[int] = None
    ) -> List[Reaction]:
        """Find reactions written at or after a point in time."""
        stmt = select(reactions_table).where(reactions_table.c.updated_at >= since)
        if cohort_level is not None:
            stmt = stmt.where(reactions_table.c.cohort_level == cohort_level)
        result = await self.session.execute(stmt)
        return [row_to_reaction(row._asdict()) for row in result.fetchall()]

    @store_unavailable_on_connection_error
    async def delete(self, reaction_id: ReactionId) -> bool:
        """Hard-delete a reaction."""
        stmt = delete(reactions_table).where(reactions_table.c.id == reaction_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    @store_unavailable_on_connection_error
    async def delete_by_content_and_actor(
        self, content_id: ContentId, actor_id: ActorId
    ) -> bool:
        """Hard-delete an actor's reaction on a content item."""
        stmt = delete(reactions_table).where(
            and_(
                reactions_table.c.content_id == content_id,
                reactions_table.c.actor_id == actor_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
