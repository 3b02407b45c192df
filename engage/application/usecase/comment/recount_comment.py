"""Recount comment counters use case."""

from uuid import UUID

from pydantic import BaseModel

from engage.application.usecase.common import ActorRequest
from engage.domain.error import NotAuthorizedError
from engage.domain.service import CommentService
from engage.domain.value import CommentId


class RecountCommentRequest(ActorRequest):
    """Recount request."""

    comment_id: str  # UUID string


class RecountCommentResponse(BaseModel):
    """Repaired counters."""

    comment_id: str
    reply_count: int
    like_count: int


class RecountCommentUseCase:
    """Use case for repairing a comment's cached reply and like counts."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize recount comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: RecountCommentRequest) -> RecountCommentResponse:
        """Execute recount flow. Only moderators may trigger a recount.

        Raises:
            NotAuthorizedError: If the actor is not a moderator
            NotFoundError: If the comment doesn't exist
        """
        if not request.is_moderator:
            raise NotAuthorizedError(
                "comment", request.comment_id, request.actor_id, "recount"
            )
        comment = await self.comment_service.recount(
            CommentId(UUID(request.comment_id))
        )
        return RecountCommentResponse(
            comment_id=str(comment.id),
            reply_count=comment.reply_count,
            like_count=comment.like_count,
        )
