"""Reaction routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from engage.application.usecase.common import ReactionItem, ReactionPageResponse
from engage.application.usecase.reaction import (
    GetReactionRequest,
    GetReactionUseCase,
    GetUserReactionRequest,
    GetUserReactionUseCase,
    ListActorReactionsRequest,
    ListActorReactionsUseCase,
    ListContentReactionsRequest,
    ListContentReactionsUseCase,
    ListReactionTypesRequest,
    ListReactionTypesResponse,
    ListReactionTypesUseCase,
    ReactRequest,
    ReactUseCase,
    RemoveContentReactionRequest,
    RemoveContentReactionUseCase,
    RemoveReactionRequest,
    RemoveReactionResponse,
    RemoveReactionUseCase,
    UpdateReactionRequest,
    UpdateReactionUseCase,
)
from engage.domain.value import ReactionCategory
from engage.interface.api.routes.actor import ActorHeaders, actor_headers, require_actor

router = APIRouter(tags=["reactions"], route_class=DishkaRoute)


class ReactAPIRequest(BaseModel):
    """API request for reacting to a content item."""

    reaction_type: str
    intensity: int = 1
    cohort_level: int | None = None
    cultural_tags: list[str] = []
    is_anonymous: bool = False
    is_private: bool = False


class UpdateReactionAPIRequest(BaseModel):
    """API request for changing a reaction."""

    reaction_type: str | None = None
    intensity: int | None = None


@router.get("/reactions/types", response_model=ListReactionTypesResponse)
async def list_reaction_types(
    list_types_use_case: FromDishka[ListReactionTypesUseCase],
    category: ReactionCategory | None = None,
) -> ListReactionTypesResponse:
    """The reaction taxonomy, optionally limited to one category."""
    return await list_types_use_case.execute(
        ListReactionTypesRequest(category=category)
    )


@router.put("/contents/{content_id}/reactions", response_model=ReactionItem)
async def react(
    content_id: str,
    request: ReactAPIRequest,
    react_use_case: FromDishka[ReactUseCase],
    actor: ActorHeaders = Depends(require_actor),
) -> ReactionItem:
    """Add a reaction, or replace the caller's existing one.

    Each caller holds at most one reaction per content item. Reacting again
    changes the type and intensity of that reaction and keeps its ID.

    Args:
        content_id: Content item (or comment) UUID
        request: Reaction type, intensity and context
        react_use_case: React use case from DI
        actor: Caller identity

    Returns:
        The stored reaction
    """
    return await react_use_case.execute(
        ReactRequest(content_id=content_id, **request.model_dump(), **actor.as_actor())
    )


@router.delete(
    "/contents/{content_id}/reactions", response_model=RemoveReactionResponse
)
async def remove_content_reaction(
    content_id: str,
    remove_use_case: FromDishka[RemoveContentReactionUseCase],
    actor: ActorHeaders = Depends(require_actor),
) -> RemoveReactionResponse:
    """Remove the caller's reaction on a content item, if any."""
    return await remove_use_case.execute(
        RemoveContentReactionRequest(content_id=content_id, **actor.as_actor())
    )


@router.get("/contents/{content_id}/reactions", response_model=ReactionPageResponse)
async def list_content_reactions(
    content_id: str,
    list_use_case: FromDishka[ListContentReactionsUseCase],
    reaction_type: str | None = None,
    page: int = Query(default=0, ge=0),
    size: int = Query(default=20, ge=1, le=100),
    viewer: ActorHeaders = Depends(actor_headers),
) -> ReactionPageResponse:
    """List reactions on a content item, newest first."""
    return await list_use_case.execute(
        ListContentReactionsRequest(
            content_id=content_id,
            reaction_type=reaction_type,
            page=page,
            size=size,
            **viewer.as_viewer(),
        )
    )


@router.get("/contents/{content_id}/reactions/mine", response_model=ReactionItem)
async def get_my_reaction(
    content_id: str,
    get_user_reaction_use_case: FromDishka[GetUserReactionUseCase],
    actor: ActorHeaders = Depends(require_actor),
) -> ReactionItem:
    """The caller's own reaction on a content item."""
    return await get_user_reaction_use_case.execute(
        GetUserReactionRequest(content_id=content_id, **actor.as_actor())
    )


@router.get("/reactions/{reaction_id}", response_model=ReactionItem)
async def get_reaction(
    reaction_id: str,
    get_reaction_use_case: FromDishka[GetReactionUseCase],
    viewer: ActorHeaders = Depends(actor_headers),
) -> ReactionItem:
    """Get a reaction by ID."""
    return await get_reaction_use_case.execute(
        GetReactionRequest(reaction_id=reaction_id, **viewer.as_viewer())
    )


@router.patch("/reactions/{reaction_id}", response_model=ReactionItem)
async def update_reaction(
    reaction_id: str,
    request: UpdateReactionAPIRequest,
    update_use_case: FromDishka[UpdateReactionUseCase],
    actor: ActorHeaders = Depends(require_actor),
) -> ReactionItem:
    """Change the type or intensity of the caller's reaction."""
    return await update_use_case.execute(
        UpdateReactionRequest(
            reaction_id=reaction_id, **request.model_dump(), **actor.as_actor()
        )
    )


@router.delete("/reactions/{reaction_id}", response_model=RemoveReactionResponse)
async def remove_reaction(
    reaction_id: str,
    remove_use_case: FromDishka[RemoveReactionUseCase],
    actor: ActorHeaders = Depends(require_actor),
) -> RemoveReactionResponse:
    """Remove one of the caller's reactions."""
    return await remove_use_case.execute(
        RemoveReactionRequest(reaction_id=reaction_id, **actor.as_actor())
    )


@router.get("/actors/{actor_id}/reactions", response_model=ReactionPageResponse)
async def list_actor_reactions(
    actor_id: str,
    list_use_case: FromDishka[ListActorReactionsUseCase],
    page: int = Query(default=0, ge=0),
    size: int = Query(default=20, ge=1, le=100),
    viewer: ActorHeaders = Depends(actor_headers),
) -> ReactionPageResponse:
    """Reactions written by an actor, newest first."""
    return await list_use_case.execute(
        ListActorReactionsRequest(
            actor_id=actor_id, page=page, size=size, **viewer.as_viewer()
        )
    )
