"""Request and response pieces shared by the use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from engage.domain.model import Comment, Reaction
from engage.domain.value import (
    INTENSITY_DESCRIPTIONS,
    Actor,
    ActorId,
    AuditEntry,
    CommentSortOrder,
    EditEntry,
    ModerationStatus,
    Page,
    PageRequest,
    ReactionCategory,
    ReactionType,
    VisibilityStatus,
)


class ActorRequest(BaseModel):
    """Request made by an identified actor."""

    actor_id: str  # Actor ID supplied by the gateway
    is_moderator: bool = False

    def actor(self) -> Actor:
        return Actor(id=ActorId(UUID(self.actor_id)), is_moderator=self.is_moderator)


class ViewerRequest(BaseModel):
    """Read request; the viewer may be anonymous."""

    viewer_id: str | None = None
    viewer_is_moderator: bool = False

    def viewer(self) -> Actor | None:
        if self.viewer_id is None:
            return None
        return Actor(
            id=ActorId(UUID(self.viewer_id)), is_moderator=self.viewer_is_moderator
        )


class PageParams(BaseModel):
    """Pagination and ordering parameters."""

    page: int = Field(default=0, ge=0)
    size: int = Field(default=20, ge=1, le=100)
    sort: CommentSortOrder = CommentSortOrder.RECENT

    def page_request(self) -> PageRequest:
        return PageRequest(page=self.page, size=self.size)


def _hides_identity(is_anonymous: bool, owner_id: ActorId, viewer: Actor | None) -> bool:
    if not is_anonymous:
        return False
    if viewer is None:
        return True
    return not (viewer.is_moderator or viewer.id == owner_id)


class CommentItem(BaseModel):
    """Comment in responses."""

    comment_id: str
    content_id: str
    author_id: str | None  # None when anonymous to this viewer
    parent_id: str | None
    depth: int
    text: str
    mentions: list[str]
    hashtags: list[str]
    media_refs: list[str]
    cohort_level: int | None
    cultural_tags: list[str]
    language_code: str | None
    sentiment_score: float | None
    is_anonymous: bool
    is_private: bool
    reply_count: int
    like_count: int
    visibility_status: VisibilityStatus
    moderation_status: ModerationStatus
    is_edited: bool
    edit_count: int
    edit_history: list[EditEntry]
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None

    @classmethod
    def from_comment(cls, comment: Comment, viewer: Actor | None) -> "CommentItem":
        hidden = _hides_identity(comment.is_anonymous, comment.author_id, viewer)
        return cls(
            comment_id=str(comment.id),
            content_id=str(comment.content_id),
            author_id=None if hidden else str(comment.author_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=comment.depth,
            text=comment.text,
            mentions=[str(m) for m in comment.mentions],
            hashtags=comment.hashtags,
            media_refs=comment.media_refs,
            cohort_level=comment.cohort_level,
            cultural_tags=comment.cultural_tags,
            language_code=comment.language_code,
            sentiment_score=comment.sentiment_score,
            is_anonymous=comment.is_anonymous,
            is_private=comment.is_private,
            reply_count=comment.reply_count,
            like_count=comment.like_count,
            visibility_status=comment.visibility_status,
            moderation_status=comment.moderation_status,
            is_edited=comment.is_edited,
            edit_count=comment.edit_count,
            edit_history=comment.edit_history,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            deleted_at=comment.deleted_at,
        )


class ModeratedCommentItem(CommentItem):
    """Comment with its moderation history, for moderators."""

    flag_reasons: list[str]
    audit_log: list[AuditEntry]

    @classmethod
    def from_comment(
        cls, comment: Comment, viewer: Actor | None
    ) -> "ModeratedCommentItem":
        item = CommentItem.from_comment(comment, viewer)
        return cls(
            **item.model_dump(),
            flag_reasons=comment.flag_reasons,
            audit_log=comment.audit_log,
        )


class CommentPageResponse(BaseModel):
    """One page of comments."""

    comments: list[CommentItem]
    total: int
    page: int
    size: int
    has_next: bool

    @classmethod
    def from_page(
        cls, page: Page[Comment], viewer: Actor | None
    ) -> "CommentPageResponse":
        return cls(
            comments=[CommentItem.from_comment(c, viewer) for c in page.items],
            total=page.total,
            page=page.page,
            size=page.size,
            has_next=page.has_next,
        )


class ReactionItem(BaseModel):
    """Reaction in responses."""

    reaction_id: str
    content_id: str
    actor_id: str | None  # None when anonymous or private to this viewer
    reaction_type: ReactionType
    display_name: str
    icon: str
    category: ReactionCategory
    intensity: int
    intensity_description: str
    cohort_level: int | None
    cultural_tags: list[str]
    is_anonymous: bool
    is_private: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_reaction(cls, reaction: Reaction, viewer: Actor | None) -> "ReactionItem":
        hidden = _hides_identity(
            reaction.is_anonymous or reaction.is_private, reaction.actor_id, viewer
        )
        return cls(
            reaction_id=str(reaction.id),
            content_id=str(reaction.content_id),
            actor_id=None if hidden else str(reaction.actor_id),
            reaction_type=reaction.reaction_type,
            display_name=reaction.reaction_type.display_name,
            icon=reaction.reaction_type.icon,
            category=reaction.reaction_type.category,
            intensity=reaction.intensity,
            intensity_description=INTENSITY_DESCRIPTIONS[reaction.intensity],
            cohort_level=reaction.cohort_level,
            cultural_tags=reaction.cultural_tags,
            is_anonymous=reaction.is_anonymous,
            is_private=reaction.is_private,
            created_at=reaction.created_at,
            updated_at=reaction.updated_at,
        )


class ReactionPageResponse(BaseModel):
    """One page of reactions."""

    reactions: list[ReactionItem]
    total: int
    page: int
    size: int
    has_next: bool

    @classmethod
    def from_page(
        cls, page: Page[Reaction], viewer: Actor | None
    ) -> "ReactionPageResponse":
        return cls(
            reactions=[ReactionItem.from_reaction(r, viewer) for r in page.items],
            total=page.total,
            page=page.page,
            size=page.size,
            has_next=page.has_next,
        )
