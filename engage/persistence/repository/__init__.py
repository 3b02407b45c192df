"""PostgreSQL repository implementations."""

from engage.persistence.repository.comment import PostgresCommentRepository
from engage.persistence.repository.reaction import PostgresReactionRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresReactionRepository",
]
