"""Unit tests for the react, update and remove reaction use cases."""

from uuid import uuid4

from dishka import AsyncContainer
import pytest

from engage.application.usecase.reaction import (
    ReactRequest,
    ReactUseCase,
    RemoveContentReactionRequest,
    RemoveContentReactionUseCase,
    RemoveReactionRequest,
    RemoveReactionUseCase,
    UpdateReactionRequest,
    UpdateReactionUseCase,
)
from engage.domain.error import (
    InvalidIntensityError,
    InvalidReactionTypeError,
    NotAuthorizedError,
    NotFoundError,
)
from engage.domain.service import ReactionService
from engage.domain.value import ReactionCategory, ReactionType
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestReactUseCase:
    """Tests for ReactUseCase."""

    @pytest.mark.asyncio
    async def test_react_returns_presentation_metadata(self, unit_env: AsyncContainer):
        """The stored reaction carries its display name, category and level text."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        use_case = ReactUseCase(reaction_service=reaction_service)
        actor_id = str(uuid4())
        content_id = str(uuid4())

        # Act
        response = await use_case.execute(
            ReactRequest(
                actor_id=actor_id,
                content_id=content_id,
                reaction_type="love",
                intensity=4,
                cohort_level=2,
                cultural_tags=["Tamil"],
            )
        )

        # Assert
        assert response.content_id == content_id
        assert response.actor_id == actor_id
        assert response.reaction_type == ReactionType.LOVE
        assert response.category == ReactionCategory.CORE
        assert response.intensity == 4
        assert response.intensity_description
        assert response.cohort_level == 2
        assert response.cultural_tags == ["Tamil"]

    @pytest.mark.asyncio
    async def test_reacting_again_replaces_reaction(self, unit_env: AsyncContainer):
        """A second reaction on the same content keeps the first one's ID."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        use_case = ReactUseCase(reaction_service=reaction_service)
        actor_id = str(uuid4())
        content_id = str(uuid4())
        first = await use_case.execute(
            ReactRequest(
                actor_id=actor_id, content_id=content_id, reaction_type="love", intensity=4
            )
        )

        # Act
        second = await use_case.execute(
            ReactRequest(
                actor_id=actor_id, content_id=content_id, reaction_type="like", intensity=2
            )
        )

        # Assert
        assert second.reaction_id == first.reaction_id
        assert second.reaction_type == ReactionType.LIKE
        assert second.intensity == 2
        assert second.created_at == first.created_at

    @pytest.mark.asyncio
    async def test_unknown_type_is_rejected(self, unit_env: AsyncContainer):
        """Types outside the taxonomy fail validation."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        use_case = ReactUseCase(reaction_service=reaction_service)

        # Act & Assert
        with pytest.raises(InvalidReactionTypeError):
            await use_case.execute(
                ReactRequest(
                    actor_id=str(uuid4()), content_id=str(uuid4()), reaction_type="meh"
                )
            )

    @pytest.mark.asyncio
    async def test_out_of_range_intensity_is_rejected(self, unit_env: AsyncContainer):
        """Intensity must be between 1 and 5."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        use_case = ReactUseCase(reaction_service=reaction_service)

        # Act & Assert
        with pytest.raises(InvalidIntensityError):
            await use_case.execute(
                ReactRequest(
                    actor_id=str(uuid4()),
                    content_id=str(uuid4()),
                    reaction_type="like",
                    intensity=9,
                )
            )

    @pytest.mark.asyncio
    async def test_private_reaction_is_visible_to_owner(
        self, unit_env: AsyncContainer
    ):
        """The owner still sees their own private reaction."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        use_case = ReactUseCase(reaction_service=reaction_service)
        actor_id = str(uuid4())

        # Act
        response = await use_case.execute(
            ReactRequest(
                actor_id=actor_id,
                content_id=str(uuid4()),
                reaction_type="pride",
                is_private=True,
            )
        )

        # Assert
        assert response.actor_id == actor_id
        assert response.is_private is True


class TestUpdateReactionUseCase:
    """Tests for UpdateReactionUseCase."""

    @pytest.mark.asyncio
    async def test_owner_updates_intensity(self, unit_env: AsyncContainer):
        """Only the given fields change."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        actor_id = str(uuid4())
        created = await ReactUseCase(reaction_service=reaction_service).execute(
            ReactRequest(
                actor_id=actor_id, content_id=str(uuid4()), reaction_type="respect"
            )
        )
        use_case = UpdateReactionUseCase(reaction_service=reaction_service)

        # Act
        response = await use_case.execute(
            UpdateReactionRequest(
                actor_id=actor_id, reaction_id=created.reaction_id, intensity=5
            )
        )

        # Assert
        assert response.reaction_id == created.reaction_id
        assert response.reaction_type == ReactionType.RESPECT
        assert response.intensity == 5

    @pytest.mark.asyncio
    async def test_other_actor_cannot_update(self, unit_env: AsyncContainer):
        """A reaction belongs to the actor who wrote it."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        created = await ReactUseCase(reaction_service=reaction_service).execute(
            ReactRequest(
                actor_id=str(uuid4()), content_id=str(uuid4()), reaction_type="like"
            )
        )
        use_case = UpdateReactionUseCase(reaction_service=reaction_service)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateReactionRequest(
                    actor_id=str(uuid4()),
                    reaction_id=created.reaction_id,
                    reaction_type="love",
                )
            )


class TestRemoveReactionUseCases:
    """Tests for RemoveReactionUseCase and RemoveContentReactionUseCase."""

    @pytest.mark.asyncio
    async def test_remove_by_id(self, unit_env: AsyncContainer):
        """Removing a reaction deletes it."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        actor_id = str(uuid4())
        created = await ReactUseCase(reaction_service=reaction_service).execute(
            ReactRequest(actor_id=actor_id, content_id=str(uuid4()), reaction_type="like")
        )
        use_case = RemoveReactionUseCase(reaction_service=reaction_service)

        # Act
        response = await use_case.execute(
            RemoveReactionRequest(actor_id=actor_id, reaction_id=created.reaction_id)
        )

        # Assert
        assert response.removed is True
        with pytest.raises(NotFoundError):
            await use_case.execute(
                RemoveReactionRequest(
                    actor_id=actor_id, reaction_id=created.reaction_id
                )
            )

    @pytest.mark.asyncio
    async def test_remove_for_content_reports_whether_removed(
        self, unit_env: AsyncContainer
    ):
        """Removing twice by content reports False the second time."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        actor_id = str(uuid4())
        content_id = str(uuid4())
        await ReactUseCase(reaction_service=reaction_service).execute(
            ReactRequest(actor_id=actor_id, content_id=content_id, reaction_type="blessing")
        )
        use_case = RemoveContentReactionUseCase(reaction_service=reaction_service)
        request = RemoveContentReactionRequest(actor_id=actor_id, content_id=content_id)

        # Act
        first = await use_case.execute(request)
        second = await use_case.execute(request)

        # Assert
        assert first.removed is True
        assert second.removed is False
