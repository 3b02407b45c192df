"""Create comment use cases."""

from uuid import UUID

from pydantic import BaseModel

from engage.application.usecase.common import ActorRequest, CommentItem
from engage.domain.service import CommentService
from engage.domain.value import ActorId, CommentId, ContentId


class CommentFields(BaseModel):
    """Optional comment fields supplied on creation."""

    mentions: list[str] = []  # Actor ID strings
    hashtags: list[str] = []
    media_refs: list[str] = []
    cohort_level: int | None = None
    cultural_tags: list[str] = []
    language_code: str | None = None
    sentiment_score: float | None = None
    is_anonymous: bool = False
    is_private: bool = False

    def service_fields(self) -> dict:
        return {
            "mentions": [ActorId(UUID(m)) for m in self.mentions],
            "hashtags": self.hashtags,
            "media_refs": self.media_refs,
            "cohort_level": self.cohort_level,
            "cultural_tags": self.cultural_tags,
            "language_code": self.language_code,
            "sentiment_score": self.sentiment_score,
            "is_anonymous": self.is_anonymous,
            "is_private": self.is_private,
        }


class CreateCommentRequest(ActorRequest, CommentFields):
    """Create comment request."""

    content_id: str  # UUID string
    text: str
    parent_id: str | None = None  # Parent comment ID for replies


class CreateReplyRequest(ActorRequest, CommentFields):
    """Reply to comment request; the content item comes from the parent."""

    parent_id: str  # UUID string
    text: str


class CreateCommentUseCase:
    """Use case for commenting on a content item or replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            ValidationError: If any field is invalid
            ParentNotFoundError: If the parent comment is missing or invalid
        """
        actor = request.actor()
        comment = await self.comment_service.create_comment(
            content_id=ContentId(UUID(request.content_id)),
            author=actor,
            text=request.text,
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
            **request.service_fields(),
        )
        return CommentItem.from_comment(comment, actor)


class CreateReplyUseCase:
    """Use case for replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create reply use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateReplyRequest) -> CommentItem:
        """Execute create reply flow.

        Raises:
            ParentNotFoundError: If the parent comment is missing or deleted
        """
        actor = request.actor()
        comment = await self.comment_service.create_reply(
            parent_id=CommentId(UUID(request.parent_id)),
            author=actor,
            text=request.text,
            **request.service_fields(),
        )
        return CommentItem.from_comment(comment, actor)
