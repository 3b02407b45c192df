"""Moderation domain service."""

from typing import Optional

import logfire

from engage.domain.error import (
    InvalidTransitionError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from engage.domain.model import Comment
from engage.domain.model.common import utcnow
from engage.domain.repository import CommentFilter, CommentRepository
from engage.domain.value import (
    Actor,
    AuditAction,
    AuditEntry,
    CommentId,
    CommentSortOrder,
    ModerationStatus,
    Page,
    PageRequest,
)

from .base import Service, paginate_comments

MAX_REASON_LENGTH = 500


class ModerationService(Service):
    """Domain service driving the comment moderation state machine.

    Every transition appends an audit entry; the log is never rewritten.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize moderation service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def moderate(
        self,
        comment_id: CommentId,
        approve: bool,
        moderator: Actor,
        reason: Optional[str] = None,
    ) -> Comment:
        """Approve or reject a pending or flagged comment.

        Args:
            comment_id: Comment ID
            approve: True to approve, False to reject
            moderator: Acting moderator
            reason: Optional decision reason

        Returns:
            The moderated comment

        Raises:
            NotAuthorizedError: If the actor is not a moderator
            NotFoundError: If the comment doesn't exist
            InvalidTransitionError: If the comment is not PENDING or FLAGGED
        """
        target = ModerationStatus.APPROVED if approve else ModerationStatus.REJECTED
        with logfire.span(
            "moderation_service.moderate",
            comment_id=str(comment_id),
            moderator_id=str(moderator.id),
            target=target.value,
        ):
            if not moderator.is_moderator:
                logfire.warn(
                    "Moderation attempt by non-moderator",
                    comment_id=str(comment_id),
                    actor_id=str(moderator.id),
                )
                raise NotAuthorizedError(
                    "comment", str(comment_id), str(moderator.id), "moderate"
                )

            comment = await self._load_for_update(comment_id)
            if not comment.moderation_status.can_transition_to(target):
                logfire.warn(
                    "Invalid moderation transition",
                    comment_id=str(comment_id),
                    current=comment.moderation_status.value,
                    target=target.value,
                )
                raise InvalidTransitionError(
                    str(comment_id), comment.moderation_status.value, target.value
                )

            action = AuditAction.APPROVED if approve else AuditAction.REJECTED
            moderated = await self._transition(
                comment,
                target,
                AuditEntry(
                    actor_id=moderator.id,
                    action=action,
                    reason=reason,
                    occurred_at=utcnow(),
                ),
            )
            logfire.info(
                "Comment moderated",
                comment_id=str(comment_id),
                moderation_status=target.value,
            )
            return moderated

    async def flag(self, comment_id: CommentId, actor: Actor, reason: str) -> Comment:
        """Flag a comment for review.

        Any actor may flag, from any state. Repeated flags accumulate their
        reasons in the audit log.

        Args:
            comment_id: Comment ID
            actor: Flagging actor
            reason: Why the comment is flagged (1-500 characters)

        Returns:
            The flagged comment

        Raises:
            ValidationError: If the reason is blank or too long
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span(
            "moderation_service.flag",
            comment_id=str(comment_id),
            actor_id=str(actor.id),
        ):
            reason = (reason or "").strip()
            if not reason:
                raise ValidationError("Flag reason must not be empty", field="reason")
            if len(reason) > MAX_REASON_LENGTH:
                raise ValidationError(
                    f"Flag reason must be at most {MAX_REASON_LENGTH} characters",
                    field="reason",
                )

            comment = await self._load_for_update(comment_id)
            flagged = await self._transition(
                comment,
                ModerationStatus.FLAGGED,
                AuditEntry(
                    actor_id=actor.id,
                    action=AuditAction.FLAGGED,
                    reason=reason,
                    occurred_at=utcnow(),
                ),
            )
            logfire.info(
                "Comment flagged",
                comment_id=str(comment_id),
                flag_count=len(flagged.flag_reasons),
            )
            return flagged

    async def list_pending(self, moderator: Actor, page: PageRequest) -> Page[Comment]:
        """List comments awaiting review (PENDING or FLAGGED), oldest first.

        Raises:
            NotAuthorizedError: If the actor is not a moderator
        """
        with logfire.span(
            "moderation_service.list_pending",
            moderator_id=str(moderator.id),
            page=page.page,
        ):
            if not moderator.is_moderator:
                raise NotAuthorizedError(
                    "moderation queue", "pending", str(moderator.id), "view"
                )
            criteria = CommentFilter(
                moderation_statuses=frozenset(
                    {ModerationStatus.PENDING, ModerationStatus.FLAGGED}
                )
            )
            return await paginate_comments(
                self.comment_repository, criteria, page, CommentSortOrder.OLDEST
            )

    async def _load_for_update(self, comment_id: CommentId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id, for_update=True)
        if comment is None:
            logfire.warn("Comment not found for moderation", comment_id=str(comment_id))
            raise NotFoundError("comment", str(comment_id))
        return comment

    async def _transition(
        self, comment: Comment, target: ModerationStatus, entry: AuditEntry
    ) -> Comment:
        return await self.comment_repository.save(
            comment.model_copy(
                update={
                    "moderation_status": target,
                    "audit_log": [*comment.audit_log, entry],
                    "updated_at": entry.occurred_at,
                }
            )
        )
