"""Like comment use case."""

from uuid import UUID

from pydantic import BaseModel

from engage.application.usecase.common import ActorRequest
from engage.domain.service import CommentService
from engage.domain.value import CommentId


class LikeCommentRequest(ActorRequest):
    """Like or un-like comment request."""

    comment_id: str  # UUID string
    liked: bool = True


class LikeCommentResponse(BaseModel):
    """Like comment response."""

    comment_id: str
    liked: bool
    like_count: int


class LikeCommentUseCase:
    """Use case for liking or un-liking a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize like comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Execute like comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist or is not visible
            ContentDeletedError: If the comment is deleted
        """
        comment = await self.comment_service.set_like(
            CommentId(UUID(request.comment_id)), request.actor(), request.liked
        )
        return LikeCommentResponse(
            comment_id=str(comment.id),
            liked=request.liked,
            like_count=comment.like_count,
        )
