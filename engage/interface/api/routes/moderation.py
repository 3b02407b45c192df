"""Moderation routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from engage.application.usecase.comment import (
    FlagCommentRequest,
    FlagCommentUseCase,
    ListPendingRequest,
    ListPendingUseCase,
    ModerateCommentRequest,
    ModerateCommentUseCase,
    ModerationQueueResponse,
)
from engage.application.usecase.common import ModeratedCommentItem
from engage.interface.api.routes.actor import ActorHeaders, require_actor

router = APIRouter(tags=["moderation"], route_class=DishkaRoute)


class ModerationDecisionAPIRequest(BaseModel):
    """API request for a moderator decision."""

    approve: bool
    reason: str | None = None


class FlagAPIRequest(BaseModel):
    """API request for flagging a comment."""

    reason: str


@router.post(
    "/moderation/comments/{comment_id}/decision",
    response_model=ModeratedCommentItem,
)
async def moderate_comment(
    comment_id: str,
    request: ModerationDecisionAPIRequest,
    moderate_use_case: FromDishka[ModerateCommentUseCase],
    actor: ActorHeaders = Depends(require_actor),
) -> ModeratedCommentItem:
    """Approve or reject a pending or flagged comment.

    Requires the moderator role.

    Args:
        comment_id: Comment UUID
        request: Decision and optional reason
        moderate_use_case: Moderate comment use case from DI
        actor: Caller identity

    Returns:
        The comment with its updated moderation status and audit log
    """
    return await moderate_use_case.execute(
        ModerateCommentRequest(
            comment_id=comment_id,
            approve=request.approve,
            reason=request.reason,
            **actor.as_actor(),
        )
    )


@router.post("/comments/{comment_id}/flag", response_model=ModeratedCommentItem)
async def flag_comment(
    comment_id: str,
    request: FlagAPIRequest,
    flag_use_case: FromDishka[FlagCommentUseCase],
    actor: ActorHeaders = Depends(require_actor),
) -> ModeratedCommentItem:
    """Flag a comment for moderator review. Any identified caller may flag."""
    return await flag_use_case.execute(
        FlagCommentRequest(
            comment_id=comment_id, reason=request.reason, **actor.as_actor()
        )
    )


@router.get("/moderation/queue", response_model=ModerationQueueResponse)
async def moderation_queue(
    list_pending_use_case: FromDishka[ListPendingUseCase],
    page: int = Query(default=0, ge=0),
    size: int = Query(default=20, ge=1, le=100),
    actor: ActorHeaders = Depends(require_actor),
) -> ModerationQueueResponse:
    """Pending and flagged comments, oldest first. Requires the moderator role."""
    return await list_pending_use_case.execute(
        ListPendingRequest(page=page, size=size, **actor.as_actor())
    )
