"""Remove reaction use cases."""

from uuid import UUID

from pydantic import BaseModel

from engage.application.usecase.common import ActorRequest
from engage.domain.service import ReactionService
from engage.domain.value import ContentId, ReactionId


class RemoveReactionRequest(ActorRequest):
    """Remove reaction by ID request."""

    reaction_id: str  # UUID string


class RemoveContentReactionRequest(ActorRequest):
    """Remove the actor's reaction on a content item."""

    content_id: str  # UUID string


class RemoveReactionResponse(BaseModel):
    """Remove reaction response."""

    removed: bool


class RemoveReactionUseCase:
    """Use case for removing a reaction."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize remove reaction use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: RemoveReactionRequest) -> RemoveReactionResponse:
        """Execute remove reaction flow.

        Raises:
            NotFoundError: If the reaction doesn't exist
            NotAuthorizedError: If the actor doesn't own the reaction
        """
        await self.reaction_service.remove_reaction(
            ReactionId(UUID(request.reaction_id)), request.actor()
        )
        return RemoveReactionResponse(removed=True)


class RemoveContentReactionUseCase:
    """Use case for removing the actor's reaction on a content item."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize remove content reaction use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(
        self, request: RemoveContentReactionRequest
    ) -> RemoveReactionResponse:
        removed = await self.reaction_service.remove_for_content(
            ContentId(UUID(request.content_id)), request.actor()
        )
        return RemoveReactionResponse(removed=removed)
