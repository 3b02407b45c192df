"""Mock persistence providers for testing."""

from dishka import Scope, provide

from engage.domain.repository import CommentRepository, ReactionRepository
from engage.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryReactionRepository,
)
from engage.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so records survive across requests of one container (API
    tests issue several requests). Every test builds its own container, so
    tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_reaction_repository(self) -> ReactionRepository:
        """Provide in-memory reaction repository."""
        return InMemoryReactionRepository()
