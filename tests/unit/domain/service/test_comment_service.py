"""Unit tests for CommentService."""

import asyncio
from uuid import uuid4

import pytest

from engage.config import CommentSettings, ModerationSettings
from engage.domain.error import (
    ContentDeletedError,
    NotAuthorizedError,
    NotFoundError,
    ParentNotFoundError,
    ValidationError,
)
from engage.domain.repository import CommentRepository, ReactionRepository
from engage.domain.service import CommentChanges, CommentService, ReactionService
from engage.domain.value import (
    AuditAction,
    CommentId,
    ContentId,
    ModerationStatus,
    PageRequest,
    ReactionType,
    VisibilityStatus,
)
from engage.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment, new_actor
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class LockRecordingCommentRepository(InMemoryCommentRepository):
    """In-memory comments that log row locks and reply-count refreshes."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, CommentId]] = []

    async def find_by_id(self, comment_id, for_update=False):
        if for_update:
            self.calls.append(("lock", comment_id))
        return await super().find_by_id(comment_id, for_update)

    async def refresh_reply_count(self, parent_id):
        self.calls.append(("refresh", parent_id))
        return await super().refresh_reply_count(parent_id)


async def _locking_service(
    unit_env,
) -> tuple[CommentService, LockRecordingCommentRepository]:
    comment_repo = LockRecordingCommentRepository()
    comment_service = CommentService(
        comment_repository=comment_repo,
        reaction_service=await unit_env.get(ReactionService),
        comment_settings=CommentSettings(),
        moderation_settings=ModerationSettings(),
    )
    return comment_service, comment_repo


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Top-level comment has depth 0, no parent and is auto-approved."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        content_id = ContentId(uuid4())
        author = new_actor()

        # Act
        result = await comment_service.create_comment(
            content_id=content_id, author=author, text="Lovely photo"
        )

        # Assert
        assert result.depth == 0
        assert result.parent_id is None
        assert result.content_id == content_id
        assert result.author_id == author.id
        assert result.reply_count == 0
        assert result.like_count == 0
        assert result.moderation_status == ModerationStatus.AUTO_APPROVED
        assert result.visibility_status == VisibilityStatus.ACTIVE

        saved = await comment_repo.find_by_id(result.id)
        assert saved is not None
        assert saved.text == "Lovely photo"

    @pytest.mark.asyncio
    async def test_reply_increments_parent_reply_count(self, unit_env):
        """A reply links to its parent and bumps the parent's reply count."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        content_id = ContentId(uuid4())
        parent = await comment_service.create_comment(
            content_id=content_id, author=new_actor(), text="Parent"
        )

        # Act
        reply = await comment_service.create_comment(
            content_id=content_id,
            author=new_actor(),
            text="Reply",
            parent_id=parent.id,
        )

        # Assert
        assert reply.parent_id == parent.id
        assert reply.depth == 1
        refreshed = await comment_repo.find_by_id(parent.id)
        assert refreshed.reply_count == 1

    @pytest.mark.asyncio
    async def test_concurrent_replies_keep_reply_count_consistent(self, unit_env):
        """Many replies created at once are all reflected in reply_count."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        content_id = ContentId(uuid4())
        parent = await comment_service.create_comment(
            content_id=content_id, author=new_actor(), text="Parent"
        )

        # Act
        await asyncio.gather(
            *(
                comment_service.create_comment(
                    content_id=content_id,
                    author=new_actor(),
                    text=f"Reply {i}",
                    parent_id=parent.id,
                )
                for i in range(10)
            )
        )

        # Assert
        refreshed = await comment_repo.find_by_id(parent.id)
        assert refreshed.reply_count == 10

    @pytest.mark.asyncio
    async def test_create_reply_takes_content_from_parent(self, unit_env):
        """create_reply attaches the reply to the parent's content item."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        content_id = ContentId(uuid4())
        parent = await comment_service.create_comment(
            content_id=content_id, author=new_actor(), text="Parent"
        )

        # Act
        reply = await comment_service.create_reply(
            parent_id=parent.id, author=new_actor(), text="Reply"
        )

        # Assert
        assert reply.content_id == content_id
        assert reply.parent_id == parent.id

    @pytest.mark.asyncio
    async def test_missing_parent_raises_parent_not_found(self, unit_env):
        """Replying to a comment that does not exist fails."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(ParentNotFoundError) as exc_info:
            await comment_service.create_comment(
                content_id=ContentId(uuid4()),
                author=new_actor(),
                text="Reply",
                parent_id=CommentId(uuid4()),
            )
        assert exc_info.value.field == "parent_id"

    @pytest.mark.asyncio
    async def test_parent_on_other_content_raises_parent_not_found(self, unit_env):
        """A parent belonging to another content item is rejected."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        parent = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=new_actor(), text="Elsewhere"
        )

        # Act & Assert
        with pytest.raises(ParentNotFoundError):
            await comment_service.create_comment(
                content_id=ContentId(uuid4()),
                author=new_actor(),
                text="Reply",
                parent_id=parent.id,
            )

    @pytest.mark.asyncio
    async def test_deleted_parent_raises_parent_not_found(self, unit_env):
        """Soft-deleted comments cannot receive new replies."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = new_actor()
        content_id = ContentId(uuid4())
        parent = await comment_service.create_comment(
            content_id=content_id, author=author, text="Parent"
        )
        await comment_service.soft_delete(parent.id, author)

        # Act & Assert
        with pytest.raises(ParentNotFoundError):
            await comment_service.create_comment(
                content_id=content_id,
                author=new_actor(),
                text="Reply",
                parent_id=parent.id,
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "x" * 2001])
    async def test_invalid_text_raises_validation_error(self, unit_env, text):
        """Blank or over-long text is rejected."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await comment_service.create_comment(
                content_id=ContentId(uuid4()), author=new_actor(), text=text
            )
        assert exc_info.value.field == "text"

    @pytest.mark.asyncio
    async def test_hashtags_are_normalized_and_merged_with_inline_tags(
        self, unit_env
    ):
        """Explicit hashtags are normalized, inline '#tags' are added once."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act
        result = await comment_service.create_comment(
            content_id=ContentId(uuid4()),
            author=new_actor(),
            text="Happy #Diwali with the #family",
            hashtags=["#Family", "diwali"],
        )

        # Assert
        assert result.hashtags == ["family", "diwali"]

    @pytest.mark.asyncio
    async def test_mentions_and_cultural_tags_are_deduplicated(self, unit_env):
        """Repeated mentions and tags are stored once, in first-seen order."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        mentioned = new_actor().id

        # Act
        result = await comment_service.create_comment(
            content_id=ContentId(uuid4()),
            author=new_actor(),
            text="Hello",
            mentions=[mentioned, mentioned],
            cultural_tags=[" punjabi ", "punjabi", "hindu"],
        )

        # Assert
        assert result.mentions == [mentioned]
        assert result.cultural_tags == ["punjabi", "hindu"]

    @pytest.mark.asyncio
    async def test_invalid_hashtag_raises_validation_error(self, unit_env):
        """Hashtags with spaces or punctuation are rejected."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await comment_service.create_comment(
                content_id=ContentId(uuid4()),
                author=new_actor(),
                text="Hello",
                hashtags=["not a tag!"],
            )
        assert exc_info.value.field == "hashtags"

    @pytest.mark.asyncio
    async def test_pre_screening_creates_pending_comments(self, unit_env):
        """With pre-screening enabled new comments wait for a moderator."""
        # Arrange
        comment_service = CommentService(
            comment_repository=await unit_env.get(CommentRepository),
            reaction_service=await unit_env.get(ReactionService),
            comment_settings=CommentSettings(),
            moderation_settings=ModerationSettings(pre_screening=True),
        )

        # Act
        result = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=new_actor(), text="Hi"
        )

        # Assert
        assert result.moderation_status == ModerationStatus.PENDING

    @pytest.mark.asyncio
    async def test_max_depth_is_enforced_when_configured(self, unit_env):
        """A configured nesting cap rejects deeper replies."""
        # Arrange
        comment_service = CommentService(
            comment_repository=await unit_env.get(CommentRepository),
            reaction_service=await unit_env.get(ReactionService),
            comment_settings=CommentSettings(max_depth=1),
            moderation_settings=ModerationSettings(),
        )
        content_id = ContentId(uuid4())
        root = await comment_service.create_comment(
            content_id=content_id, author=new_actor(), text="Root"
        )
        child = await comment_service.create_comment(
            content_id=content_id, author=new_actor(), text="Child", parent_id=root.id
        )

        # Act & Assert
        with pytest.raises(ValidationError):
            await comment_service.create_comment(
                content_id=content_id,
                author=new_actor(),
                text="Grandchild",
                parent_id=child.id,
            )


class TestGetComment:
    """Tests for get_comment and get_thread."""

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        """Unknown ids raise NotFoundError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.get_comment(CommentId(uuid4()))

    @pytest.mark.asyncio
    async def test_deleted_comment_is_still_retrievable(self, unit_env):
        """Soft-deleted comments can be fetched by id for audit."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = new_actor()
        comment = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=author, text="Gone soon"
        )
        await comment_service.soft_delete(comment.id, author)

        # Act
        result = await comment_service.get_comment(comment.id)

        # Assert
        assert result.visibility_status == VisibilityStatus.DELETED
        assert result.deleted_at is not None

    @pytest.mark.asyncio
    async def test_pending_comment_hidden_from_other_viewers(self, unit_env):
        """Pending comments are only visible to the author and moderators."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = new_actor()
        comment = await comment_repo.save(
            make_comment(
                ContentId(uuid4()),
                author_id=author.id,
                moderation_status=ModerationStatus.PENDING,
            )
        )

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.get_comment(comment.id, new_actor())
        with pytest.raises(NotFoundError):
            await comment_service.get_comment(comment.id, None)
        assert (await comment_service.get_comment(comment.id, author)).id == comment.id
        moderator = new_actor(is_moderator=True)
        assert (
            await comment_service.get_comment(comment.id, moderator)
        ).id == comment.id

    @pytest.mark.asyncio
    async def test_thread_returns_live_direct_replies_oldest_first(self, unit_env):
        """get_thread loads one level of live replies in creation order."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        content_id = ContentId(uuid4())
        author = new_actor()
        root = await comment_service.create_comment(
            content_id=content_id, author=author, text="Root"
        )
        first = await comment_service.create_reply(root.id, new_actor(), "First")
        second = await comment_service.create_reply(root.id, author, "Second")
        deleted = await comment_service.create_reply(root.id, author, "Deleted")
        await comment_service.create_reply(first.id, new_actor(), "Nested")
        await comment_service.soft_delete(deleted.id, author)

        # Act
        thread = await comment_service.get_thread(root.id)

        # Assert
        assert thread.comment.id == root.id
        assert [r.id for r in thread.replies] == [first.id, second.id]


class TestUpdateComment:
    """Tests for update_comment method."""

    @pytest.mark.asyncio
    async def test_author_edit_records_history(self, unit_env):
        """Edits replace text, set is_edited and append to the history."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = new_actor()
        comment = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=author, text="Original"
        )

        # Act
        result = await comment_service.update_comment(
            comment.id, author, CommentChanges(text="Edited #memories"), "typo"
        )

        # Assert
        assert result.text == "Edited #memories"
        assert result.hashtags == ["memories"]
        assert result.is_edited is True
        assert result.edit_count == 1
        assert len(result.edit_history) == 1
        assert result.edit_history[0].editor_id == author.id
        assert result.edit_history[0].reason == "typo"
        assert result.moderation_status == comment.moderation_status

    @pytest.mark.asyncio
    async def test_each_edit_appends_history(self, unit_env):
        """Repeated edits keep every earlier history entry."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = new_actor()
        comment = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=author, text="v1"
        )

        # Act
        await comment_service.update_comment(
            comment.id, author, CommentChanges(text="v2")
        )
        result = await comment_service.update_comment(
            comment.id, author, CommentChanges(is_private=True)
        )

        # Assert
        assert result.edit_count == 2
        assert len(result.edit_history) == 2
        assert result.text == "v2"
        assert result.is_private is True

    @pytest.mark.asyncio
    async def test_non_author_cannot_edit(self, unit_env):
        """Only the author may edit, moderators included."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=new_actor(), text="Mine"
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await comment_service.update_comment(
                comment.id, new_actor(is_moderator=True), CommentChanges(text="x")
            )

    @pytest.mark.asyncio
    async def test_deleted_comment_cannot_be_edited(self, unit_env):
        """Editing a soft-deleted comment is a conflict."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = new_actor()
        comment = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=author, text="Mine"
        )
        await comment_service.soft_delete(comment.id, author)

        # Act & Assert
        with pytest.raises(ContentDeletedError):
            await comment_service.update_comment(
                comment.id, author, CommentChanges(text="again")
            )

    @pytest.mark.asyncio
    async def test_edit_locks_comment_row(self, unit_env):
        """The edited row is read under lock so no history entry is lost."""
        # Arrange
        comment_service, comment_repo = await _locking_service(unit_env)
        author = new_actor()
        comment = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=author, text="v1"
        )
        comment_repo.calls.clear()

        # Act
        await comment_service.update_comment(
            comment.id, author, CommentChanges(text="v2")
        )

        # Assert
        assert comment_repo.calls[0] == ("lock", comment.id)

    @pytest.mark.asyncio
    async def test_concurrent_edits_keep_every_history_entry(self, unit_env):
        """n simultaneous edits give edit_count n and n history entries."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = new_actor()
        comment = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=author, text="v0"
        )

        # Act
        await asyncio.gather(
            *(
                comment_service.update_comment(
                    comment.id, author, CommentChanges(text=f"v{i}")
                )
                for i in range(1, 6)
            )
        )

        # Assert
        result = await comment_service.get_comment(comment.id, author)
        assert result.edit_count == 5
        assert len(result.edit_history) == 5


class TestSoftDelete:
    """Tests for soft_delete method."""

    @pytest.mark.asyncio
    async def test_delete_reply_repairs_parent_count_and_orphans_children(
        self, unit_env
    ):
        """Deleting a reply decrements the parent count; its children stay put."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        content_id = ContentId(uuid4())
        author = new_actor()
        root = await comment_service.create_comment(
            content_id=content_id, author=new_actor(), text="Root"
        )
        reply = await comment_service.create_reply(root.id, author, "Reply")
        grandchild = await comment_service.create_reply(
            reply.id, new_actor(), "Grandchild"
        )

        # Act
        deleted = await comment_service.soft_delete(reply.id, author)

        # Assert
        assert deleted.visibility_status == VisibilityStatus.DELETED
        assert deleted.audit_log[-1].action == AuditAction.DELETED
        assert (await comment_repo.find_by_id(root.id)).reply_count == 0
        orphan = await comment_repo.find_by_id(grandchild.id)
        assert orphan.parent_id == reply.id
        assert not orphan.is_deleted

    @pytest.mark.asyncio
    async def test_moderator_can_delete(self, unit_env):
        """Moderators may delete comments they did not write."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=new_actor(), text="Spam"
        )
        moderator = new_actor(is_moderator=True)

        # Act
        result = await comment_service.soft_delete(comment.id, moderator)

        # Assert
        assert result.is_deleted
        assert result.audit_log[-1].actor_id == moderator.id

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        """Other actors cannot delete a comment."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=new_actor(), text="Mine"
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await comment_service.soft_delete(comment.id, new_actor())

    @pytest.mark.asyncio
    async def test_second_delete_is_a_no_op(self, unit_env):
        """Deleting twice leaves a single audit entry."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = new_actor()
        comment = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=author, text="Mine"
        )
        first = await comment_service.soft_delete(comment.id, author)

        # Act
        second = await comment_service.soft_delete(comment.id, author)

        # Assert
        assert second.deleted_at == first.deleted_at
        assert len(second.audit_log) == 1

    @pytest.mark.asyncio
    async def test_delete_reply_locks_parent_before_recount(self, unit_env):
        """The parent row is locked before its reply count is recomputed."""
        # Arrange
        comment_service, comment_repo = await _locking_service(unit_env)
        author = new_actor()
        root = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=new_actor(), text="Root"
        )
        reply = await comment_service.create_reply(root.id, author, "Reply")
        comment_repo.calls.clear()

        # Act
        await comment_service.soft_delete(reply.id, author)

        # Assert
        assert comment_repo.calls == [
            ("lock", reply.id),
            ("lock", root.id),
            ("refresh", root.id),
        ]

    @pytest.mark.asyncio
    async def test_concurrent_sibling_deletes_leave_zero_replies(self, unit_env):
        """Deleting every reply at once brings the parent count to zero."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        root = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=new_actor(), text="Root"
        )
        authors = [new_actor() for _ in range(4)]
        replies = [
            await comment_service.create_reply(root.id, author, "Reply")
            for author in authors
        ]

        # Act
        await asyncio.gather(
            *(
                comment_service.soft_delete(reply.id, author)
                for reply, author in zip(replies, authors)
            )
        )

        # Assert
        assert (await comment_repo.find_by_id(root.id)).reply_count == 0


class TestListing:
    """Tests for list_for_content and list_replies."""

    @pytest.mark.asyncio
    async def test_list_for_content_excludes_deleted_and_hidden(self, unit_env):
        """Only live comments the viewer may see are listed."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        content_id = ContentId(uuid4())
        author = new_actor()
        visible = await comment_service.create_comment(
            content_id=content_id, author=author, text="Visible"
        )
        deleted = await comment_service.create_comment(
            content_id=content_id, author=author, text="Deleted"
        )
        await comment_service.soft_delete(deleted.id, author)
        await comment_repo.save(
            make_comment(content_id, moderation_status=ModerationStatus.REJECTED)
        )
        await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=author, text="Other content"
        )

        # Act
        page = await comment_service.list_for_content(content_id, PageRequest())

        # Assert
        assert page.total == 1
        assert [c.id for c in page.items] == [visible.id]

    @pytest.mark.asyncio
    async def test_list_for_content_paginates(self, unit_env):
        """Pages are sized as requested and report the total."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        content_id = ContentId(uuid4())
        for i in range(5):
            await comment_service.create_comment(
                content_id=content_id, author=new_actor(), text=f"Comment {i}"
            )

        # Act
        first = await comment_service.list_for_content(
            content_id, PageRequest(page=0, size=2)
        )
        last = await comment_service.list_for_content(
            content_id, PageRequest(page=2, size=2)
        )

        # Assert
        assert first.total == 5
        assert len(first.items) == 2
        assert first.has_next is True
        assert len(last.items) == 1
        assert last.has_next is False

    @pytest.mark.asyncio
    async def test_list_replies_of_missing_parent_raises_not_found(self, unit_env):
        """Listing replies of an unknown comment fails."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.list_replies(CommentId(uuid4()), PageRequest())


class TestLikes:
    """Tests for set_like and recount."""

    @pytest.mark.asyncio
    async def test_like_twice_counts_once(self, unit_env):
        """Liking is idempotent per actor."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=new_actor(), text="Like me"
        )
        fan = new_actor()

        # Act
        await comment_service.set_like(comment.id, fan, True)
        result = await comment_service.set_like(comment.id, fan, True)

        # Assert
        assert result.like_count == 1

    @pytest.mark.asyncio
    async def test_unlike_removes_like(self, unit_env):
        """Un-liking drops the like count back."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=new_actor(), text="Like me"
        )
        fan = new_actor()
        other = new_actor()
        await comment_service.set_like(comment.id, fan, True)
        await comment_service.set_like(comment.id, other, True)

        # Act
        result = await comment_service.set_like(comment.id, fan, False)

        # Assert
        assert result.like_count == 1

    @pytest.mark.asyncio
    async def test_unlike_keeps_other_reaction_types(self, unit_env):
        """Un-liking leaves a non-LIKE reaction on the comment in place."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        reaction_service = await unit_env.get(ReactionService)
        comment = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=new_actor(), text="Namaste"
        )
        fan = new_actor()
        await reaction_service.react(ContentId(comment.id), fan, ReactionType.LOVE, 5)

        # Act
        result = await comment_service.set_like(comment.id, fan, False)

        # Assert
        assert result.like_count == 0
        kept = await reaction_service.get_user_reaction(ContentId(comment.id), fan.id)
        assert kept.reaction_type == ReactionType.LOVE
        assert kept.intensity == 5

    @pytest.mark.asyncio
    async def test_like_replaces_other_reaction(self, unit_env):
        """Liking turns the actor's existing reaction into the single LIKE."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        reaction_service = await unit_env.get(ReactionService)
        comment = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=new_actor(), text="Namaste"
        )
        fan = new_actor()
        await reaction_service.react(ContentId(comment.id), fan, ReactionType.WOW, 4)

        # Act
        result = await comment_service.set_like(comment.id, fan, True)

        # Assert
        assert result.like_count == 1
        assert await reaction_service.count_for_content(ContentId(comment.id)) == 1

    @pytest.mark.asyncio
    async def test_cannot_like_deleted_comment(self, unit_env):
        """Likes on deleted comments are rejected."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = new_actor()
        comment = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=author, text="Bye"
        )
        await comment_service.soft_delete(comment.id, author)

        # Act & Assert
        with pytest.raises(ContentDeletedError):
            await comment_service.set_like(comment.id, new_actor(), True)

    @pytest.mark.asyncio
    async def test_recount_repairs_drifted_counters(self, unit_env):
        """recount rebuilds both counters from live records."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        reaction_service = await unit_env.get(ReactionService)
        content_id = ContentId(uuid4())
        drifted = await comment_repo.save(
            make_comment(content_id, reply_count=7, like_count=3)
        )
        await comment_repo.save(make_comment(content_id, parent_id=drifted.id))
        await reaction_service.react(ContentId(drifted.id), new_actor(), "like")

        # Act
        result = await comment_service.recount(drifted.id)

        # Assert
        assert result.reply_count == 1
        assert result.like_count == 1

    @pytest.mark.asyncio
    async def test_recount_ignores_non_like_reactions(self, unit_env):
        """Only LIKE reactions count towards like_count."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        reaction_repo = await unit_env.get(ReactionRepository)
        reaction_service = ReactionService(reaction_repository=reaction_repo)
        comment = await comment_service.create_comment(
            content_id=ContentId(uuid4()), author=new_actor(), text="Hi"
        )
        await reaction_service.react(ContentId(comment.id), new_actor(), "love")

        # Act
        result = await comment_service.recount(comment.id)

        # Assert
        assert result.like_count == 0
