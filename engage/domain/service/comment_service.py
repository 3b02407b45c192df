"""Comment domain service.

Manages the comment tree: creation of comments and replies, cached reply and
like counts, edits with history, and soft deletion.
"""

from typing import Optional
from uuid import uuid4

import logfire

from engage.config import CommentSettings, ModerationSettings
from engage.domain.error import (
    ContentDeletedError,
    NotAuthorizedError,
    NotFoundError,
    ParentNotFoundError,
    ValidationError,
)
from engage.domain.model import Comment, CommentThread
from engage.domain.model.common import utcnow
from engage.domain.repository import CommentRepository
from engage.domain.value import (
    Actor,
    ActorId,
    AuditAction,
    AuditEntry,
    CommentId,
    CommentSortOrder,
    ContentId,
    EditEntry,
    ModerationStatus,
    Page,
    PageRequest,
    ReactionType,
    VisibilityStatus,
)
from engage.domain.value.common import ValueObject
from engage.domain.value.types import dedupe

from .base import Service, paginate_comments, visible_comments
from .reaction_service import ReactionService
from .validation import (
    check_cohort_level,
    check_language_code,
    check_sentiment,
    clean_media_refs,
    clean_tags,
    normalize_hashtags,
    require_text,
)


class CommentChanges(ValueObject):
    """Author-editable fields of a comment. None leaves a field unchanged."""

    text: Optional[str] = None
    mentions: Optional[list[ActorId]] = None
    hashtags: Optional[list[str]] = None
    media_refs: Optional[list[str]] = None
    cultural_tags: Optional[list[str]] = None
    language_code: Optional[str] = None
    is_anonymous: Optional[bool] = None
    is_private: Optional[bool] = None


class CommentService(Service):
    """Domain service for comment tree operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        reaction_service: ReactionService,
        comment_settings: CommentSettings,
        moderation_settings: ModerationSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            reaction_service: Reaction service (comment likes are reactions)
            comment_settings: Text and nesting limits
            moderation_settings: Initial moderation policy
        """
        self.comment_repository = comment_repository
        self.reaction_service = reaction_service
        self.comment_settings = comment_settings
        self.moderation_settings = moderation_settings

    async def create_comment(
        self,
        content_id: ContentId,
        author: Actor,
        text: str,
        parent_id: Optional[CommentId] = None,
        mentions: Optional[list[ActorId]] = None,
        hashtags: Optional[list[str]] = None,
        media_refs: Optional[list[str]] = None,
        cohort_level: Optional[int] = None,
        cultural_tags: Optional[list[str]] = None,
        language_code: Optional[str] = None,
        sentiment_score: Optional[float] = None,
        is_anonymous: bool = False,
        is_private: bool = False,
    ) -> Comment:
        """Create a comment on a content item or reply to another comment.

        Args:
            content_id: Content item ID
            author: Authoring actor
            text: Comment text (non-blank, bounded length)
            parent_id: Parent comment ID for replies (None for top-level)
            mentions: Mentioned actor IDs
            hashtags: Explicit hashtags, merged with '#tags' found in the text
            media_refs: Resolved media URIs
            cohort_level: Author's cohort level
            cultural_tags: Cultural context tags
            language_code: Language of the text
            sentiment_score: Externally computed sentiment in [-1, 1]
            is_anonymous: Hide the author in public listings
            is_private: Private comment flag

        Returns:
            Created comment

        Raises:
            ValidationError: If any field is invalid
            ParentNotFoundError: If the parent is missing, deleted or belongs
                to another content item
        """
        with logfire.span(
            "comment_service.create_comment",
            content_id=str(content_id),
            author_id=str(author.id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            require_text(text, self.comment_settings.max_text_length)

            depth = 0
            if parent_id:
                # Lock the parent so concurrent replies repair its count serially
                parent = await self.comment_repository.find_by_id(
                    parent_id, for_update=True
                )
                if parent is None or parent.is_deleted:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        content_id=str(content_id),
                    )
                    raise ParentNotFoundError(str(parent_id))
                if parent.content_id != content_id:
                    logfire.error(
                        "Parent comment does not belong to content",
                        parent_id=str(parent_id),
                        parent_content_id=str(parent.content_id),
                        target_content_id=str(content_id),
                    )
                    raise ParentNotFoundError(str(parent_id))
                depth = parent.depth + 1
                max_depth = self.comment_settings.max_depth
                if max_depth is not None and depth > max_depth:
                    raise ValidationError(
                        f"Replies may be nested at most {max_depth} levels",
                        field="parent_id",
                    )

            initial_status = (
                ModerationStatus.PENDING
                if self.moderation_settings.pre_screening
                else ModerationStatus.AUTO_APPROVED
            )
            now = utcnow()
            comment = Comment(
                id=CommentId(uuid4()),
                content_id=content_id,
                author_id=author.id,
                parent_id=parent_id,
                depth=depth,
                text=text,
                mentions=dedupe(mentions or []),
                hashtags=normalize_hashtags(hashtags or [], text),
                media_refs=clean_media_refs(media_refs),
                cohort_level=check_cohort_level(cohort_level),
                cultural_tags=clean_tags(cultural_tags),
                language_code=check_language_code(language_code),
                sentiment_score=check_sentiment(sentiment_score),
                is_anonymous=is_anonymous,
                is_private=is_private,
                moderation_status=initial_status,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            if parent_id:
                reply_count = await self.comment_repository.refresh_reply_count(
                    parent_id
                )
                logfire.info(
                    "Parent reply count repaired",
                    parent_id=str(parent_id),
                    reply_count=reply_count,
                )

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                content_id=str(content_id),
                depth=depth,
                moderation_status=saved.moderation_status.value,
            )
            return saved

    async def create_reply(
        self, parent_id: CommentId, author: Actor, text: str, **fields
    ) -> Comment:
        """Reply to a comment; the content item is taken from the parent.

        Raises:
            ParentNotFoundError: If the parent is missing or deleted
        """
        parent = await self.comment_repository.find_by_id(parent_id)
        if parent is None or parent.is_deleted:
            raise ParentNotFoundError(str(parent_id))
        return await self.create_comment(
            content_id=parent.content_id,
            author=author,
            text=text,
            parent_id=parent_id,
            **fields,
        )

    async def get_comment(
        self, comment_id: CommentId, viewer: Optional[Actor] = None
    ) -> Comment:
        """Get a comment by ID, including soft-deleted comments.

        Args:
            comment_id: Comment ID
            viewer: Viewing actor (None for anonymous)

        Returns:
            The comment

        Raises:
            NotFoundError: If the comment doesn't exist or the viewer may not
                see it
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None or not comment.is_visible_to(viewer):
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("comment", str(comment_id))
            return comment

    async def update_comment(
        self,
        comment_id: CommentId,
        actor: Actor,
        changes: CommentChanges,
        edit_reason: Optional[str] = None,
    ) -> Comment:
        """Edit a comment's content and record the edit.

        Moderation status is not affected by edits.

        Args:
            comment_id: Comment ID
            actor: Editing actor (must be the author)
            changes: Fields to replace
            edit_reason: Optional reason stored in the edit history

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the actor is not the author
            ContentDeletedError: If the comment is deleted
            ValidationError: If a changed field is invalid
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            actor_id=str(actor.id),
        ):
            comment = await self.comment_repository.find_by_id(
                comment_id, for_update=True
            )
            if comment is None:
                raise NotFoundError("comment", str(comment_id))
            if comment.author_id != actor.id:
                logfire.warn(
                    "Comment edit by non-author",
                    comment_id=str(comment_id),
                    actor_id=str(actor.id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(actor.id))
            if comment.is_deleted:
                raise ContentDeletedError("comment", str(comment_id))

            update: dict[str, object] = {}
            text = comment.text
            if changes.text is not None:
                text = require_text(changes.text, self.comment_settings.max_text_length)
                update["text"] = text
            if changes.text is not None or changes.hashtags is not None:
                explicit = (
                    changes.hashtags
                    if changes.hashtags is not None
                    else comment.hashtags
                )
                update["hashtags"] = normalize_hashtags(explicit, text)
            if changes.mentions is not None:
                update["mentions"] = dedupe(changes.mentions)
            if changes.media_refs is not None:
                update["media_refs"] = clean_media_refs(changes.media_refs)
            if changes.cultural_tags is not None:
                update["cultural_tags"] = clean_tags(changes.cultural_tags)
            if changes.language_code is not None:
                update["language_code"] = check_language_code(changes.language_code)
            if changes.is_anonymous is not None:
                update["is_anonymous"] = changes.is_anonymous
            if changes.is_private is not None:
                update["is_private"] = changes.is_private

            now = utcnow()
            update.update(
                is_edited=True,
                edit_count=comment.edit_count + 1,
                edit_history=[
                    *comment.edit_history,
                    EditEntry(edited_at=now, editor_id=actor.id, reason=edit_reason),
                ],
                updated_at=now,
            )

            updated = await self.comment_repository.save(
                comment.model_copy(update=update)
            )
            logfire.info(
                "Comment edited",
                comment_id=str(comment_id),
                edit_count=updated.edit_count,
                text_length=len(updated.text),
            )
            return updated

    async def soft_delete(self, comment_id: CommentId, actor: Actor) -> Comment:
        """Soft-delete a comment and repair the parent's reply count.

        Replies of a deleted comment keep pointing at it (orphaned, not
        re-parented). Deleting an already-deleted comment is a no-op.

        Args:
            comment_id: Comment ID
            actor: Deleting actor (author or moderator)

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the actor is neither author nor moderator
        """
        with logfire.span(
            "comment_service.soft_delete",
            comment_id=str(comment_id),
            actor_id=str(actor.id),
        ):
            comment = await self.comment_repository.find_by_id(
                comment_id, for_update=True
            )
            if comment is None:
                raise NotFoundError("comment", str(comment_id))
            if comment.author_id != actor.id and not actor.is_moderator:
                logfire.warn(
                    "Comment delete by non-author",
                    comment_id=str(comment_id),
                    actor_id=str(actor.id),
                )
                raise NotAuthorizedError(
                    "comment", str(comment_id), str(actor.id), "delete"
                )
            if comment.is_deleted:
                logfire.info("Comment already deleted", comment_id=str(comment_id))
                return comment

            now = utcnow()
            deleted = await self.comment_repository.save(
                comment.model_copy(
                    update={
                        "visibility_status": VisibilityStatus.DELETED,
                        "deleted_at": now,
                        "updated_at": now,
                        "audit_log": [
                            *comment.audit_log,
                            AuditEntry(
                                actor_id=actor.id,
                                action=AuditAction.DELETED,
                                occurred_at=now,
                            ),
                        ],
                    }
                )
            )

            if comment.parent_id:
                # Lock the parent so sibling deletes recount it serially
                await self.comment_repository.find_by_id(
                    comment.parent_id, for_update=True
                )
                await self.comment_repository.refresh_reply_count(comment.parent_id)

            logfire.info(
                "Comment soft-deleted",
                comment_id=str(comment_id),
                by_moderator=actor.is_moderator and comment.author_id != actor.id,
            )
            return deleted

    async def get_thread(
        self, comment_id: CommentId, viewer: Optional[Actor] = None
    ) -> CommentThread:
        """Get a comment with its direct live replies, oldest first.

        Raises:
            NotFoundError: If the comment doesn't exist or is not visible
        """
        with logfire.span("comment_service.get_thread", comment_id=str(comment_id)):
            comment = await self.get_comment(comment_id, viewer)
            replies = await self.comment_repository.find_all(
                visible_comments(viewer, parent_id=comment_id),
                sort=CommentSortOrder.OLDEST,
            )
            return CommentThread(comment=comment, replies=replies)

    async def list_replies(
        self,
        parent_id: CommentId,
        page: PageRequest,
        viewer: Optional[Actor] = None,
        sort: CommentSortOrder = CommentSortOrder.RECENT,
    ) -> Page[Comment]:
        """List direct live replies of a comment.

        Raises:
            NotFoundError: If the parent doesn't exist or is not visible
        """
        with logfire.span(
            "comment_service.list_replies", parent_id=str(parent_id), page=page.page
        ):
            await self.get_comment(parent_id, viewer)
            return await paginate_comments(
                self.comment_repository,
                visible_comments(viewer, parent_id=parent_id),
                page,
                sort,
            )

    async def list_for_content(
        self,
        content_id: ContentId,
        page: PageRequest,
        viewer: Optional[Actor] = None,
        sort: CommentSortOrder = CommentSortOrder.RECENT,
        top_level_only: bool = False,
    ) -> Page[Comment]:
        """List live comments on a content item visible to the viewer."""
        with logfire.span(
            "comment_service.list_for_content",
            content_id=str(content_id),
            page=page.page,
            sort=sort.value,
        ):
            return await paginate_comments(
                self.comment_repository,
                visible_comments(
                    viewer, content_id=content_id, top_level_only=top_level_only
                ),
                page,
                sort,
            )

    async def set_like(self, comment_id: CommentId, actor: Actor, liked: bool) -> Comment:
        """Like or un-like a comment.

        A like is a LIKE reaction whose content id is the comment id, so the
        one-reaction-per-actor rule applies: liking replaces any other
        reaction the actor left on the comment. Un-liking only removes a LIKE
        and leaves other reaction types alone. like_count is repaired from
        the live number of LIKE reactions afterwards.

        Raises:
            NotFoundError: If the comment doesn't exist or is not visible
            ContentDeletedError: If the comment is deleted
        """
        with logfire.span(
            "comment_service.set_like",
            comment_id=str(comment_id),
            actor_id=str(actor.id),
            liked=liked,
        ):
            comment = await self.get_comment(comment_id, actor)
            if comment.is_deleted:
                raise ContentDeletedError("comment", str(comment_id))

            target = ContentId(comment_id)
            if liked:
                await self.reaction_service.react(target, actor, ReactionType.LIKE)
            else:
                existing = await self.reaction_service.find_user_reaction(
                    target, actor.id
                )
                if existing is not None and existing.reaction_type == ReactionType.LIKE:
                    await self.reaction_service.remove_for_content(target, actor)

            return await self._repair_like_count(comment_id)

    async def recount(self, comment_id: CommentId) -> Comment:
        """Repair reply_count and like_count from live records.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.recount", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(
                comment_id, for_update=True
            )
            if comment is None:
                raise NotFoundError("comment", str(comment_id))
            await self.comment_repository.refresh_reply_count(comment_id)
            repaired = await self._repair_like_count(comment_id)
            logfire.info(
                "Comment counters repaired",
                comment_id=str(comment_id),
                reply_count=repaired.reply_count,
                like_count=repaired.like_count,
                previous_reply_count=comment.reply_count,
                previous_like_count=comment.like_count,
            )
            return repaired

    async def _repair_like_count(self, comment_id: CommentId) -> Comment:
        like_count = await self.reaction_service.count_for_content(
            ContentId(comment_id), ReactionType.LIKE
        )
        await self.comment_repository.set_like_count(comment_id, like_count)
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            raise NotFoundError("comment", str(comment_id))
        return comment
