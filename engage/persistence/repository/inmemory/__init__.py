"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .reaction import InMemoryReactionRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryReactionRepository",
]
