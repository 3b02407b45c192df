"""Get comment use cases."""

from uuid import UUID

from pydantic import BaseModel

from engage.application.usecase.common import (
    CommentItem,
    CommentPageResponse,
    PageParams,
    ViewerRequest,
)
from engage.domain.service import CommentService
from engage.domain.value import CommentId, ContentId


class GetCommentRequest(ViewerRequest):
    """Get comment request."""

    comment_id: str  # UUID string


class GetThreadResponse(BaseModel):
    """A comment with its direct replies."""

    comment: CommentItem
    replies: list[CommentItem]


class GetRepliesRequest(ViewerRequest, PageParams):
    """Get replies request."""

    comment_id: str  # UUID string


class ListContentCommentsRequest(ViewerRequest, PageParams):
    """List comments on a content item."""

    content_id: str  # UUID string
    top_level_only: bool = False


class GetCommentUseCase:
    """Use case for getting a single comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        """Execute get comment flow.

        Soft-deleted comments are still returned, with their deleted status.

        Raises:
            NotFoundError: If the comment doesn't exist or is hidden from the viewer
        """
        viewer = request.viewer()
        comment = await self.comment_service.get_comment(
            CommentId(UUID(request.comment_id)), viewer
        )
        return CommentItem.from_comment(comment, viewer)


class GetThreadUseCase:
    """Use case for getting a comment together with its direct replies."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get thread use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> GetThreadResponse:
        viewer = request.viewer()
        thread = await self.comment_service.get_thread(
            CommentId(UUID(request.comment_id)), viewer
        )
        return GetThreadResponse(
            comment=CommentItem.from_comment(thread.comment, viewer),
            replies=[CommentItem.from_comment(r, viewer) for r in thread.replies],
        )


class GetRepliesUseCase:
    """Use case for paging through the direct replies of a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get replies use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetRepliesRequest) -> CommentPageResponse:
        viewer = request.viewer()
        page = await self.comment_service.list_replies(
            CommentId(UUID(request.comment_id)),
            request.page_request(),
            viewer=viewer,
            sort=request.sort,
        )
        return CommentPageResponse.from_page(page, viewer)


class ListContentCommentsUseCase:
    """Use case for listing the comments on a content item."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize list content comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: ListContentCommentsRequest) -> CommentPageResponse:
        """Execute list comments flow.

        Args:
            request: Content ID, paging, ordering and top-level filter

        Returns:
            One page of live comments visible to the viewer
        """
        viewer = request.viewer()
        page = await self.comment_service.list_for_content(
            ContentId(UUID(request.content_id)),
            request.page_request(),
            viewer=viewer,
            sort=request.sort,
            top_level_only=request.top_level_only,
        )
        return CommentPageResponse.from_page(page, viewer)
