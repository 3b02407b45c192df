"""Comment moderation use cases."""

from uuid import UUID

from pydantic import BaseModel

from engage.application.usecase.common import (
    ActorRequest,
    ModeratedCommentItem,
    PageParams,
)
from engage.domain.service import ModerationService
from engage.domain.value import CommentId


class ModerateCommentRequest(ActorRequest):
    """Approve or reject comment request."""

    comment_id: str  # UUID string
    approve: bool
    reason: str | None = None


class FlagCommentRequest(ActorRequest):
    """Flag comment request."""

    comment_id: str  # UUID string
    reason: str


class ListPendingRequest(ActorRequest, PageParams):
    """Moderation queue request."""


class ModerationQueueResponse(BaseModel):
    """One page of the moderation queue."""

    comments: list[ModeratedCommentItem]
    total: int
    page: int
    size: int
    has_next: bool


class ModerateCommentUseCase:
    """Use case for a moderator decision on a comment."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize moderate comment use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(self, request: ModerateCommentRequest) -> ModeratedCommentItem:
        """Execute moderation flow.

        Raises:
            NotAuthorizedError: If the actor is not a moderator
            InvalidTransitionError: If the comment is not awaiting review
        """
        actor = request.actor()
        comment = await self.moderation_service.moderate(
            CommentId(UUID(request.comment_id)),
            approve=request.approve,
            moderator=actor,
            reason=request.reason,
        )
        return ModeratedCommentItem.from_comment(comment, actor)


class FlagCommentUseCase:
    """Use case for flagging a comment for review."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize flag comment use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(self, request: FlagCommentRequest) -> ModeratedCommentItem:
        actor = request.actor()
        comment = await self.moderation_service.flag(
            CommentId(UUID(request.comment_id)), actor, request.reason
        )
        return ModeratedCommentItem.from_comment(comment, actor)


class ListPendingUseCase:
    """Use case for reading the moderation queue."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize list pending use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(self, request: ListPendingRequest) -> ModerationQueueResponse:
        """Execute moderation queue flow.

        Returns:
            Pending and flagged comments, oldest first

        Raises:
            NotAuthorizedError: If the actor is not a moderator
        """
        actor = request.actor()
        page = await self.moderation_service.list_pending(
            actor, request.page_request()
        )
        return ModerationQueueResponse(
            comments=[ModeratedCommentItem.from_comment(c, actor) for c in page.items],
            total=page.total,
            page=page.page,
            size=page.size,
            has_next=page.has_next,
        )
