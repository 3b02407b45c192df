"""React use cases."""

from uuid import UUID

from engage.application.usecase.common import ActorRequest, ReactionItem
from engage.domain.service import ReactionService
from engage.domain.value import ContentId, ReactionId


class ReactRequest(ActorRequest):
    """Add or replace reaction request."""

    content_id: str  # UUID string of the content item or comment
    reaction_type: str  # Taxonomy name, e.g. "love"
    intensity: int = 1
    cohort_level: int | None = None
    cultural_tags: list[str] = []
    is_anonymous: bool = False
    is_private: bool = False


class UpdateReactionRequest(ActorRequest):
    """Update reaction request. Omitted fields are left unchanged."""

    reaction_id: str  # UUID string
    reaction_type: str | None = None
    intensity: int | None = None


class ReactUseCase:
    """Use case for reacting to a content item."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize react use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: ReactRequest) -> ReactionItem:
        """Execute react flow.

        Reacting again to the same content replaces the earlier reaction
        and keeps its ID.

        Args:
            request: React request

        Returns:
            The stored reaction

        Raises:
            InvalidReactionTypeError: If the type is not in the taxonomy
            InvalidIntensityError: If intensity is outside 1-5
        """
        actor = request.actor()
        reaction = await self.reaction_service.react(
            content_id=ContentId(UUID(request.content_id)),
            actor=actor,
            reaction_type=request.reaction_type,
            intensity=request.intensity,
            cohort_level=request.cohort_level,
            cultural_tags=request.cultural_tags,
            is_anonymous=request.is_anonymous,
            is_private=request.is_private,
        )
        return ReactionItem.from_reaction(reaction, actor)


class UpdateReactionUseCase:
    """Use case for changing an existing reaction."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize update reaction use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: UpdateReactionRequest) -> ReactionItem:
        actor = request.actor()
        reaction = await self.reaction_service.update_reaction(
            ReactionId(UUID(request.reaction_id)),
            actor,
            reaction_type=request.reaction_type,
            intensity=request.intensity,
        )
        return ReactionItem.from_reaction(reaction, actor)
