"""Comment entity.

Comments are threaded discussions attached to a content item. Replies point
at their parent through ``parent_id``; children are never embedded and are
always found by querying for records with a matching parent.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from engage.domain.model.common import DomainModel, utcnow
from engage.domain.value import (
    Actor,
    ActorId,
    AuditAction,
    AuditEntry,
    CommentId,
    ContentId,
    EditEntry,
    ModerationStatus,
    VisibilityStatus,
)


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a content item or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level), immutable
    - depth: Nesting level (0 for top-level, increments with each reply)

    reply_count and like_count are cached values repaired from live counts;
    they are never set directly by callers.
    """

    id: CommentId
    content_id: ContentId
    author_id: ActorId
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)

    text: str = Field(min_length=1)
    mentions: list[ActorId] = Field(default_factory=list)
    hashtags: list[str] = Field(default_factory=list)
    media_refs: list[str] = Field(default_factory=list)

    cohort_level: Optional[int] = Field(default=None, ge=0)
    cultural_tags: list[str] = Field(default_factory=list)
    language_code: Optional[str] = Field(default=None, max_length=5)
    sentiment_score: Optional[float] = Field(default=None, ge=-1.0, le=1.0)
    is_anonymous: bool = False
    is_private: bool = False

    reply_count: int = Field(default=0, ge=0)
    like_count: int = Field(default=0, ge=0)

    visibility_status: VisibilityStatus = VisibilityStatus.ACTIVE
    moderation_status: ModerationStatus = ModerationStatus.AUTO_APPROVED

    is_edited: bool = False
    edit_count: int = Field(default=0, ge=0)
    edit_history: list[EditEntry] = Field(default_factory=list)
    audit_log: list[AuditEntry] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.visibility_status == VisibilityStatus.DELETED

    @property
    def flag_reasons(self) -> list[str]:
        """Reasons of every flag raised against this comment, first-seen order."""
        reasons: list[str] = []
        for entry in self.audit_log:
            if entry.action == AuditAction.FLAGGED and entry.reason:
                if entry.reason not in reasons:
                    reasons.append(entry.reason)
        return reasons

    def is_visible_to(self, viewer: Actor | None) -> bool:
        """Apply the moderation visibility policy.

        Approved and auto-approved comments are public. Everything else is
        only visible to the author and to moderators.
        """
        if self.moderation_status.is_public:
            return True
        if viewer is None:
            return False
        return viewer.is_moderator or viewer.id == self.author_id


class CommentThread(DomainModel):
    """A comment together with its direct, visible, live replies."""

    comment: Comment
    replies: list[Comment] = Field(default_factory=list)
