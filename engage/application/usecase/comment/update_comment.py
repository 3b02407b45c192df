"""Update comment use case."""

from uuid import UUID

from engage.application.usecase.common import ActorRequest, CommentItem
from engage.domain.service import CommentChanges, CommentService
from engage.domain.value import ActorId, CommentId


class UpdateCommentRequest(ActorRequest):
    """Update comment request. Omitted fields are left unchanged."""

    comment_id: str  # UUID string
    text: str | None = None
    mentions: list[str] | None = None
    hashtags: list[str] | None = None
    media_refs: list[str] | None = None
    cultural_tags: list[str] | None = None
    language_code: str | None = None
    is_anonymous: bool | None = None
    is_private: bool | None = None
    edit_reason: str | None = None


class UpdateCommentUseCase:
    """Use case for editing a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            The updated comment

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the actor is not the author
            ContentDeletedError: If the comment is deleted
        """
        actor = request.actor()
        changes = CommentChanges(
            text=request.text,
            mentions=(
                [ActorId(UUID(m)) for m in request.mentions]
                if request.mentions is not None
                else None
            ),
            hashtags=request.hashtags,
            media_refs=request.media_refs,
            cultural_tags=request.cultural_tags,
            language_code=request.language_code,
            is_anonymous=request.is_anonymous,
            is_private=request.is_private,
        )
        comment = await self.comment_service.update_comment(
            CommentId(UUID(request.comment_id)),
            actor,
            changes,
            edit_reason=request.edit_reason,
        )
        return CommentItem.from_comment(comment, actor)
