"""Repository interfaces for the engagement domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from engage.domain.repository.comment import CommentFilter, CommentRepository
from engage.domain.repository.reaction import ReactionRepository

__all__ = [
    "CommentFilter",
    "CommentRepository",
    "ReactionRepository",
]
