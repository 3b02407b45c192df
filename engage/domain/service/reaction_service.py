"""Reaction domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from engage.domain.error import (
    InvalidIntensityError,
    InvalidReactionTypeError,
    NotAuthorizedError,
    NotFoundError,
)
from engage.domain.model import Reaction
from engage.domain.model.common import utcnow
from engage.domain.repository import ReactionRepository
from engage.domain.value import (
    MAX_INTENSITY,
    MIN_INTENSITY,
    Actor,
    ActorId,
    ContentId,
    Page,
    PageRequest,
    ReactionCategory,
    ReactionId,
    ReactionType,
    ReactionTypeInfo,
)

from .base import Service
from .validation import check_cohort_level, clean_tags


class ReactionService(Service):
    """Domain service for reaction operations.

    Enforces one live reaction per (actor, content): reacting again replaces
    the existing reaction in place.
    """

    def __init__(self, reaction_repository: ReactionRepository) -> None:
        """Initialize reaction service.

        Args:
            reaction_repository: Reaction repository
        """
        self.reaction_repository = reaction_repository

    async def react(
        self,
        content_id: ContentId,
        actor: Actor,
        reaction_type: ReactionType | str,
        intensity: int = MIN_INTENSITY,
        cohort_level: Optional[int] = None,
        cultural_tags: Optional[list[str]] = None,
        is_anonymous: bool = False,
        is_private: bool = False,
    ) -> Reaction:
        """Add a reaction or replace the actor's existing one.

        Args:
            content_id: Content item (or comment) being reacted to
            actor: Reacting actor
            reaction_type: Reaction type or its name
            intensity: Strength 1-5
            cohort_level: Actor's cohort level, kept from the first write
            cultural_tags: Context tags, kept from the first write
            is_anonymous: Hide the actor in public listings
            is_private: Only visible to the actor

        Returns:
            The stored reaction. On replace it keeps its original id.

        Raises:
            InvalidReactionTypeError: If the type is not in the taxonomy
            InvalidIntensityError: If intensity is outside 1-5
        """
        with logfire.span(
            "reaction_service.react",
            content_id=str(content_id),
            actor_id=str(actor.id),
            reaction_type=str(reaction_type),
            intensity=intensity,
        ):
            resolved_type = self._resolve_type(reaction_type)
            self._check_intensity(intensity)

            now = utcnow()
            candidate = Reaction(
                id=ReactionId(uuid4()),
                content_id=content_id,
                actor_id=actor.id,
                reaction_type=resolved_type,
                intensity=intensity,
                cohort_level=check_cohort_level(cohort_level),
                cultural_tags=clean_tags(cultural_tags),
                is_anonymous=is_anonymous,
                is_private=is_private,
                created_at=now,
                updated_at=now,
            )

            stored = await self.reaction_repository.upsert(candidate)
            if stored.id == candidate.id:
                logfire.info(
                    "Reaction added",
                    reaction_id=str(stored.id),
                    content_id=str(content_id),
                    reaction_type=stored.reaction_type.value,
                )
            else:
                logfire.info(
                    "Reaction replaced",
                    reaction_id=str(stored.id),
                    content_id=str(content_id),
                    reaction_type=stored.reaction_type.value,
                    intensity=stored.intensity,
                )
            return stored

    async def update_reaction(
        self,
        reaction_id: ReactionId,
        actor: Actor,
        reaction_type: Optional[ReactionType | str] = None,
        intensity: Optional[int] = None,
    ) -> Reaction:
        """Change the type and/or intensity of an existing reaction.

        Args:
            reaction_id: Reaction ID
            actor: Acting actor (must own the reaction)
            reaction_type: New type, unchanged if None
            intensity: New intensity, unchanged if None

        Returns:
            Updated reaction

        Raises:
            NotFoundError: If the reaction doesn't exist
            NotAuthorizedError: If the actor doesn't own the reaction
        """
        with logfire.span(
            "reaction_service.update_reaction",
            reaction_id=str(reaction_id),
            actor_id=str(actor.id),
        ):
            reaction = await self.get_reaction(reaction_id)
            self._check_owner(reaction, actor, "update")

            changes: dict[str, object] = {"updated_at": utcnow()}
            if reaction_type is not None:
                changes["reaction_type"] = self._resolve_type(reaction_type)
            if intensity is not None:
                self._check_intensity(intensity)
                changes["intensity"] = intensity

            updated = await self.reaction_repository.update(
                reaction.model_copy(update=changes)
            )
            logfire.info(
                "Reaction updated",
                reaction_id=str(reaction_id),
                reaction_type=updated.reaction_type.value,
                intensity=updated.intensity,
            )
            return updated

    async def remove_reaction(self, reaction_id: ReactionId, actor: Actor) -> None:
        """Hard-delete a reaction owned by the actor.

        Raises:
            NotFoundError: If the reaction doesn't exist
            NotAuthorizedError: If the actor doesn't own the reaction
        """
        with logfire.span(
            "reaction_service.remove_reaction",
            reaction_id=str(reaction_id),
            actor_id=str(actor.id),
        ):
            reaction = await self.get_reaction(reaction_id)
            self._check_owner(reaction, actor, "remove")
            await self.reaction_repository.delete(reaction_id)
            logfire.info(
                "Reaction removed",
                reaction_id=str(reaction_id),
                content_id=str(reaction.content_id),
            )

    async def remove_for_content(self, content_id: ContentId, actor: Actor) -> bool:
        """Remove the actor's reaction on a content item, if any.

        Returns:
            True if a reaction was removed, False if none existed
        """
        with logfire.span(
            "reaction_service.remove_for_content",
            content_id=str(content_id),
            actor_id=str(actor.id),
        ):
            removed = await self.reaction_repository.delete_by_content_and_actor(
                content_id, actor.id
            )
            logfire.info(
                "Reaction removed" if removed else "No reaction to remove",
                content_id=str(content_id),
                actor_id=str(actor.id),
            )
            return removed

    async def get_reaction(self, reaction_id: ReactionId) -> Reaction:
        """Get a reaction by ID.

        Raises:
            NotFoundError: If the reaction doesn't exist
        """
        reaction = await self.reaction_repository.find_by_id(reaction_id)
        if reaction is None:
            logfire.warn("Reaction not found", reaction_id=str(reaction_id))
            raise NotFoundError("reaction", str(reaction_id))
        return reaction

    async def find_user_reaction(
        self, content_id: ContentId, actor_id: ActorId
    ) -> Optional[Reaction]:
        """Get the actor's reaction on a content item, or None."""
        return await self.reaction_repository.find_by_content_and_actor(
            content_id, actor_id
        )

    async def get_user_reaction(
        self, content_id: ContentId, actor_id: ActorId
    ) -> Reaction:
        """Get the actor's reaction on a content item.

        Raises:
            NotFoundError: If the actor has not reacted
        """
        reaction = await self.find_user_reaction(content_id, actor_id)
        if reaction is None:
            raise NotFoundError("reaction", f"{content_id}/{actor_id}")
        return reaction

    async def list_for_content(
        self,
        content_id: ContentId,
        page: PageRequest,
        reaction_type: Optional[ReactionType] = None,
    ) -> Page[Reaction]:
        """List reactions on a content item, newest first."""
        with logfire.span(
            "reaction_service.list_for_content",
            content_id=str(content_id),
            page=page.page,
            size=page.size,
        ):
            total = await self.reaction_repository.count_by_content(
                content_id, reaction_type
            )
            items = await self.reaction_repository.find_by_content(
                content_id, reaction_type, limit=page.size, offset=page.offset
            )
            return Page(items=items, total=total, page=page.page, size=page.size)

    async def list_by_actor(self, actor_id: ActorId, page: PageRequest) -> Page[Reaction]:
        """List reactions written by an actor, newest first."""
        with logfire.span(
            "reaction_service.list_by_actor", actor_id=str(actor_id), page=page.page
        ):
            total = await self.reaction_repository.count_by_actor(actor_id)
            items = await self.reaction_repository.find_by_actor(
                actor_id, limit=page.size, offset=page.offset
            )
            return Page(items=items, total=total, page=page.page, size=page.size)

    async def count_for_content(
        self, content_id: ContentId, reaction_type: Optional[ReactionType] = None
    ) -> int:
        """Live number of reactions on a content item."""
        return await self.reaction_repository.count_by_content(content_id, reaction_type)

    @staticmethod
    def reaction_types(
        category: Optional[ReactionCategory] = None,
    ) -> list[ReactionTypeInfo]:
        """The reaction taxonomy, optionally limited to one category."""
        types = ReactionType.in_category(category) if category else list(ReactionType)
        return [ReactionTypeInfo.of(t) for t in types]

    @staticmethod
    def _resolve_type(reaction_type: ReactionType | str) -> ReactionType:
        if isinstance(reaction_type, ReactionType):
            return reaction_type
        resolved = ReactionType.parse(reaction_type)
        if resolved is None:
            raise InvalidReactionTypeError(reaction_type)
        return resolved

    @staticmethod
    def _check_intensity(intensity: int) -> None:
        if not MIN_INTENSITY <= intensity <= MAX_INTENSITY:
            raise InvalidIntensityError(intensity)

    @staticmethod
    def _check_owner(reaction: Reaction, actor: Actor, action: str) -> None:
        if reaction.actor_id != actor.id:
            logfire.warn(
                "Reaction ownership check failed",
                reaction_id=str(reaction.id),
                actor_id=str(actor.id),
                action=action,
            )
            raise NotAuthorizedError("reaction", str(reaction.id), str(actor.id), action)
