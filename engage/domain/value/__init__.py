"""Domain value objects for engagement."""

from engage.domain.value.identifiers import (
    ActorId,
    CommentId,
    ContentId,
    ReactionId,
)
from engage.domain.value.types import (
    INTENSITY_DESCRIPTIONS,
    MAX_INTENSITY,
    MIN_INTENSITY,
    Actor,
    AuditAction,
    AuditEntry,
    CommentSortOrder,
    EditEntry,
    Hashtag,
    IntensityLevel,
    ModerationStatus,
    Page,
    PageRequest,
    ReactionCategory,
    ReactionType,
    ReactionTypeInfo,
    VisibilityStatus,
)

__all__ = [
    # Identifiers
    "ActorId",
    "CommentId",
    "ContentId",
    "ReactionId",
    # Reactions
    "ReactionCategory",
    "ReactionType",
    "ReactionTypeInfo",
    "IntensityLevel",
    "INTENSITY_DESCRIPTIONS",
    "MIN_INTENSITY",
    "MAX_INTENSITY",
    # Comment lifecycle
    "VisibilityStatus",
    "ModerationStatus",
    "AuditAction",
    "AuditEntry",
    "EditEntry",
    "CommentSortOrder",
    "Actor",
    "Hashtag",
    # Pagination
    "Page",
    "PageRequest",
]
