"""Delete comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from engage.application.usecase.common import ActorRequest
from engage.domain.service import CommentService
from engage.domain.value import CommentId


class DeleteCommentRequest(ActorRequest):
    """Delete comment request."""

    comment_id: str  # UUID string


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted_at: datetime | None


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Replies are kept and keep pointing at the deleted comment.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the actor is neither author nor moderator
        """
        comment = await self.comment_service.soft_delete(
            CommentId(UUID(request.comment_id)), request.actor()
        )
        return DeleteCommentResponse(
            comment_id=str(comment.id), deleted_at=comment.deleted_at
        )
