"""Unit tests for the comment update, delete, like and recount use cases."""

from uuid import UUID, uuid4

from dishka import AsyncContainer
import pytest

from engage.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    LikeCommentRequest,
    LikeCommentUseCase,
    RecountCommentRequest,
    RecountCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from engage.application.usecase.common import CommentItem
from engage.domain.error import NotAuthorizedError, NotFoundError
from engage.domain.repository import CommentRepository
from engage.domain.service import CommentService
from engage.domain.value import CommentId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _create(
    comment_service: CommentService, author_id: str, text: str = "Original"
) -> CommentItem:
    return await CreateCommentUseCase(comment_service=comment_service).execute(
        CreateCommentRequest(actor_id=author_id, content_id=str(uuid4()), text=text)
    )


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_update_text_records_edit(self, unit_env: AsyncContainer):
        """Editing the text marks the comment edited and logs who edited it."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author_id = str(uuid4())
        created = await _create(comment_service, author_id)
        use_case = UpdateCommentUseCase(comment_service=comment_service)

        # Act
        response = await use_case.execute(
            UpdateCommentRequest(
                actor_id=author_id,
                comment_id=created.comment_id,
                text="Corrected",
                edit_reason="typo",
            )
        )

        # Assert
        assert response.text == "Corrected"
        assert response.is_edited is True
        assert response.edit_count == 1
        assert response.edit_history[0].editor_id == UUID(author_id)
        assert response.edit_history[0].reason == "typo"

    @pytest.mark.asyncio
    async def test_update_only_given_fields(self, unit_env: AsyncContainer):
        """Fields left out of the request keep their current values."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author_id = str(uuid4())
        created = await _create(comment_service, author_id, text="Keep me #tag")
        use_case = UpdateCommentUseCase(comment_service=comment_service)

        # Act
        response = await use_case.execute(
            UpdateCommentRequest(
                actor_id=author_id,
                comment_id=created.comment_id,
                cultural_tags=["Punjabi"],
            )
        )

        # Assert
        assert response.text == "Keep me #tag"
        assert response.hashtags == ["tag"]
        assert response.cultural_tags == ["Punjabi"]

    @pytest.mark.asyncio
    async def test_update_by_other_actor_is_rejected(self, unit_env: AsyncContainer):
        """Only the author may edit."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        created = await _create(comment_service, str(uuid4()))
        use_case = UpdateCommentUseCase(comment_service=comment_service)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateCommentRequest(
                    actor_id=str(uuid4()), comment_id=created.comment_id, text="Mine"
                )
            )


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_sets_deleted_at(self, unit_env: AsyncContainer):
        """Deleting returns the deletion timestamp."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author_id = str(uuid4())
        created = await _create(comment_service, author_id)
        use_case = DeleteCommentUseCase(comment_service=comment_service)

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(actor_id=author_id, comment_id=created.comment_id)
        )

        # Assert
        assert response.comment_id == created.comment_id
        assert response.deleted_at is not None

    @pytest.mark.asyncio
    async def test_delete_missing_comment(self, unit_env: AsyncContainer):
        """Deleting an unknown comment raises NotFoundError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        use_case = DeleteCommentUseCase(comment_service=comment_service)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteCommentRequest(actor_id=str(uuid4()), comment_id=str(uuid4()))
            )


class TestLikeCommentUseCase:
    """Tests for LikeCommentUseCase."""

    @pytest.mark.asyncio
    async def test_like_and_unlike(self, unit_env: AsyncContainer):
        """Liking raises the count and unliking lowers it again."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        created = await _create(comment_service, str(uuid4()))
        use_case = LikeCommentUseCase(comment_service=comment_service)
        fan_id = str(uuid4())

        # Act
        liked = await use_case.execute(
            LikeCommentRequest(actor_id=fan_id, comment_id=created.comment_id)
        )
        liked_again = await use_case.execute(
            LikeCommentRequest(actor_id=fan_id, comment_id=created.comment_id)
        )
        unliked = await use_case.execute(
            LikeCommentRequest(
                actor_id=fan_id, comment_id=created.comment_id, liked=False
            )
        )

        # Assert
        assert liked.liked is True
        assert liked.like_count == 1
        assert liked_again.like_count == 1
        assert unliked.liked is False
        assert unliked.like_count == 0


class TestRecountCommentUseCase:
    """Tests for RecountCommentUseCase."""

    @pytest.mark.asyncio
    async def test_recount_repairs_counters(self, unit_env: AsyncContainer):
        """A moderator recount restores counts from the live records."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repository = await unit_env.get(CommentRepository)
        created = await _create(comment_service, str(uuid4()))
        await LikeCommentUseCase(comment_service=comment_service).execute(
            LikeCommentRequest(actor_id=str(uuid4()), comment_id=created.comment_id)
        )
        stored = await comment_repository.find_by_id(
            CommentId(UUID(created.comment_id))
        )
        await comment_repository.set_like_count(stored.id, 9)
        use_case = RecountCommentUseCase(comment_service=comment_service)

        # Act
        response = await use_case.execute(
            RecountCommentRequest(
                actor_id=str(uuid4()),
                is_moderator=True,
                comment_id=created.comment_id,
            )
        )

        # Assert
        assert response.reply_count == 0
        assert response.like_count == 1

    @pytest.mark.asyncio
    async def test_recount_requires_moderator(self, unit_env: AsyncContainer):
        """Ordinary actors cannot trigger a recount."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        created = await _create(comment_service, str(uuid4()))
        use_case = RecountCommentUseCase(comment_service=comment_service)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                RecountCommentRequest(
                    actor_id=str(uuid4()), comment_id=created.comment_id
                )
            )
