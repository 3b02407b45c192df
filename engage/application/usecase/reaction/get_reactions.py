"""Get reactions use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from engage.application.usecase.common import (
    ActorRequest,
    ReactionItem,
    ReactionPageResponse,
    ViewerRequest,
)
from engage.domain.error import InvalidReactionTypeError
from engage.domain.service import ReactionService
from engage.domain.value import (
    ActorId,
    ContentId,
    PageRequest,
    ReactionCategory,
    ReactionId,
    ReactionType,
    ReactionTypeInfo,
)


class GetReactionRequest(ViewerRequest):
    """Get reaction request."""

    reaction_id: str  # UUID string


class ReactionPageParams(BaseModel):
    """Pagination for reaction listings (always newest first)."""

    page: int = Field(default=0, ge=0)
    size: int = Field(default=20, ge=1, le=100)

    def page_request(self) -> PageRequest:
        return PageRequest(page=self.page, size=self.size)


class ListContentReactionsRequest(ViewerRequest, ReactionPageParams):
    """List reactions on a content item."""

    content_id: str  # UUID string
    reaction_type: str | None = None


class GetUserReactionRequest(ActorRequest):
    """Get the actor's own reaction on a content item."""

    content_id: str  # UUID string


class ListActorReactionsRequest(ViewerRequest, ReactionPageParams):
    """List reactions written by an actor."""

    actor_id: str  # UUID string of the listed actor


class ListReactionTypesRequest(BaseModel):
    """Reaction taxonomy request."""

    category: ReactionCategory | None = None


class ListReactionTypesResponse(BaseModel):
    """Reaction taxonomy response."""

    reaction_types: list[ReactionTypeInfo]


class GetReactionUseCase:
    """Use case for getting a reaction by ID."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize get reaction use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: GetReactionRequest) -> ReactionItem:
        """Execute get reaction flow.

        Raises:
            NotFoundError: If the reaction doesn't exist
        """
        reaction = await self.reaction_service.get_reaction(
            ReactionId(UUID(request.reaction_id))
        )
        return ReactionItem.from_reaction(reaction, request.viewer())


class ListContentReactionsUseCase:
    """Use case for listing the reactions on a content item."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize list content reactions use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(
        self, request: ListContentReactionsRequest
    ) -> ReactionPageResponse:
        """Execute list reactions flow.

        Args:
            request: Content ID, optional type filter and paging

        Returns:
            One page of reactions, newest first

        Raises:
            InvalidReactionTypeError: If the type filter is not in the taxonomy
        """
        reaction_type = None
        if request.reaction_type is not None:
            reaction_type = ReactionType.parse(request.reaction_type)
            if reaction_type is None:
                raise InvalidReactionTypeError(request.reaction_type)

        page = await self.reaction_service.list_for_content(
            ContentId(UUID(request.content_id)),
            request.page_request(),
            reaction_type=reaction_type,
        )
        return ReactionPageResponse.from_page(page, request.viewer())


class GetUserReactionUseCase:
    """Use case for getting the actor's own reaction on a content item."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize get user reaction use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: GetUserReactionRequest) -> ReactionItem:
        """Execute get user reaction flow.

        Raises:
            NotFoundError: If the actor has not reacted to the content
        """
        actor = request.actor()
        reaction = await self.reaction_service.get_user_reaction(
            ContentId(UUID(request.content_id)), actor.id
        )
        return ReactionItem.from_reaction(reaction, actor)


class ListActorReactionsUseCase:
    """Use case for listing the reactions an actor has written."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize list actor reactions use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: ListActorReactionsRequest) -> ReactionPageResponse:
        page = await self.reaction_service.list_by_actor(
            ActorId(UUID(request.actor_id)), request.page_request()
        )
        return ReactionPageResponse.from_page(page, request.viewer())


class ListReactionTypesUseCase:
    """Use case for the reaction taxonomy."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize list reaction types use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: ListReactionTypesRequest) -> ListReactionTypesResponse:
        return ListReactionTypesResponse(
            reaction_types=self.reaction_service.reaction_types(request.category)
        )
