"""In-memory reaction repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from engage.domain.model import Reaction
from engage.domain.repository import ReactionRepository
from engage.domain.value import ActorId, ContentId, ReactionId, ReactionType


class InMemoryReactionRepository(ReactionRepository):
    """In-memory implementation of ReactionRepository for testing.

    Reactions are keyed by (content_id, actor_id), mirroring the unique
    constraint of the reactions table.
    """

    def __init__(self) -> None:
        self._reactions: dict[tuple[ContentId, ActorId], Reaction] = {}

    async def upsert(self, reaction: Reaction) -> Reaction:
        """Insert or replace in one step (no await between check and write)."""
        key = (reaction.content_id, reaction.actor_id)
        existing = self._reactions.get(key)
        if existing is None:
            stored = reaction
        else:
            stored = existing.model_copy(
                update={
                    "reaction_type": reaction.reaction_type,
                    "intensity": reaction.intensity,
                    "is_anonymous": reaction.is_anonymous,
                    "is_private": reaction.is_private,
                    "updated_at": reaction.updated_at,
                }
            )
        self._reactions[key] = stored
        return stored

    async def update(self, reaction: Reaction) -> Reaction:
        """Overwrite an existing reaction by ID.

        Raises:
            IntegrityError: If the update would create a second reaction for
                the same (content_id, actor_id)
        """
        key = (reaction.content_id, reaction.actor_id)
        current = self._find(reaction.id)
        if current is not None:
            del self._reactions[(current.content_id, current.actor_id)]
        if key in self._reactions:
            raise IntegrityError("Duplicate reaction", None, Exception())
        self._reactions[key] = reaction
        return reaction

    async def find_by_id(self, reaction_id: ReactionId) -> Optional[Reaction]:
        """Find a reaction by ID."""
        return self._find(reaction_id)

    async def find_by_content_and_actor(
        self, content_id: ContentId, actor_id: ActorId
    ) -> Optional[Reaction]:
        """Find an actor's reaction on a content item."""
        return self._reactions.get((content_id, actor_id))

    async def find_by_content(
        self,
        content_id: ContentId,
        reaction_type: Optional[ReactionType] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Reaction]:
        """Find reactions on a content item, newest first."""
        matches = [
            r
            for r in self._reactions.values()
            if r.content_id == content_id
            and (reaction_type is None or r.reaction_type == reaction_type)
        ]
        return self._page(matches, limit, offset)

    async def count_by_content(
        self, content_id: ContentId, reaction_type: Optional[ReactionType] = None
    ) -> int:
        """Count reactions on a content item."""
        return sum(
            1
            for r in self._reactions.values()
            if r.content_id == content_id
            and (reaction_type is None or r.reaction_type == reaction_type)
        )

    async def find_by_actor(
        self, actor_id: ActorId, limit: Optional[int] = None, offset: int = 0
    ) -> list[Reaction]:
        """Find reactions written by an actor, newest first."""
        matches = [r for r in self._reactions.values() if r.actor_id == actor_id]
        return self._page(matches, limit, offset)

    async def count_by_actor(self, actor_id: ActorId) -> int:
        """Count reactions written by an actor."""
        return sum(1 for r in self._reactions.values() if r.actor_id == actor_id)

    async def find_since(
        self, since: datetime, cohort_level: Optional[int] = None
    ) -> list[Reaction]:
        """Find reactions written at or after a point in time."""
        return [
            r
            for r in self._reactions.values()
            if r.updated_at >= since
            and (cohort_level is None or r.cohort_level == cohort_level)
        ]

    async def delete(self, reaction_id: ReactionId) -> bool:
        """Hard-delete a reaction."""
        reaction = self._find(reaction_id)
        if reaction is None:
            return False
        del self._reactions[(reaction.content_id, reaction.actor_id)]
        return True

    async def delete_by_content_and_actor(
        self, content_id: ContentId, actor_id: ActorId
    ) -> bool:
        """Hard-delete an actor's reaction on a content item."""
        return self._reactions.pop((content_id, actor_id), None) is not None

    def _find(self, reaction_id: ReactionId) -> Optional[Reaction]:
        for reaction in self._reactions.values():
            if reaction.id == reaction_id:
                return reaction
        return None

    @staticmethod
    def _page(
        reactions: list[Reaction], limit: Optional[int], offset: int
    ) -> list[Reaction]:
        reactions.sort(key=lambda r: (r.updated_at, r.id), reverse=True)
        if limit is None:
            return reactions[offset:]
        return reactions[offset : offset + limit]
