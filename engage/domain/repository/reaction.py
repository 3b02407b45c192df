"""Reaction repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from engage.domain.model import Reaction
from engage.domain.value import ActorId, ContentId, ReactionId, ReactionType


class ReactionRepository(ABC):
    """Repository for Reaction entity.

    Defines the contract for reaction persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def upsert(self, reaction: Reaction) -> Reaction:
        """Insert a reaction or replace the actor's existing one atomically.

        When the actor already reacted to the content, the stored record keeps
        its id, created_at and context tags; reaction_type, intensity and
        updated_at are replaced.

        Args:
            reaction: The reaction to write

        Returns:
            The stored reaction
        """
        pass

    @abstractmethod
    async def update(self, reaction: Reaction) -> Reaction:
        """Overwrite an existing reaction by ID.

        Args:
            reaction: The reaction with updated fields

        Returns:
            The stored reaction
        """
        pass

    @abstractmethod
    async def find_by_id(self, reaction_id: ReactionId) -> Optional[Reaction]:
        """Find a reaction by ID.

        Args:
            reaction_id: The reaction's unique identifier

        Returns:
            The reaction if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_content_and_actor(
        self, content_id: ContentId, actor_id: ActorId
    ) -> Optional[Reaction]:
        """Find an actor's reaction on a content item.

        Args:
            content_id: The content item's ID
            actor_id: The actor's ID

        Returns:
            The reaction if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_content(
        self,
        content_id: ContentId,
        reaction_type: Optional[ReactionType] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Reaction]:
        """Find reactions on a content item, newest first.

        Args:
            content_id: The content item's ID
            reaction_type: Only reactions of this type
            limit: Maximum number of results (None for all)
            offset: Number of results to skip

        Returns:
            List of reactions
        """
        pass

    @abstractmethod
    async def count_by_content(
        self, content_id: ContentId, reaction_type: Optional[ReactionType] = None
    ) -> int:
        """Count reactions on a content item.

        Args:
            content_id: The content item's ID
            reaction_type: Only reactions of this type

        Returns:
            Number of reactions
        """
        pass

    @abstractmethod
    async def find_by_actor(
        self, actor_id: ActorId, limit: Optional[int] = None, offset: int = 0
    ) -> List[Reaction]:
        """Find reactions written by an actor, newest first.

        Args:
            actor_id: The actor's ID
            limit: Maximum number of results (None for all)
            offset: Number of results to skip

        Returns:
            List of reactions
        """
        pass

    @abstractmethod
    async def count_by_actor(self, actor_id: ActorId) -> int:
        """Count reactions written by an actor."""
        pass

    @abstractmethod
    async def find_since(
        self, since: datetime, cohort_level: Optional[int] = None
    ) -> List[Reaction]:
        """Find reactions written (updated_at) at or after a point in time.

        Args:
            since: Window start
            cohort_level: Only reactions tagged with this cohort level

        Returns:
            List of reactions
        """
        pass

    @abstractmethod
    async def delete(self, reaction_id: ReactionId) -> bool:
        """Hard-delete a reaction.

        Args:
            reaction_id: The reaction's ID

        Returns:
            True if a reaction was removed
        """
        pass

    @abstractmethod
    async def delete_by_content_and_actor(
        self, content_id: ContentId, actor_id: ActorId
    ) -> bool:
        """Hard-delete an actor's reaction on a content item.

        Args:
            content_id: The content item's ID
            actor_id: The actor's ID

        Returns:
            True if a reaction was removed
        """
        pass
