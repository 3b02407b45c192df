"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from engage.domain.model import Comment, Reaction
from engage.domain.value import (
    ActorId,
    AuditEntry,
    CommentId,
    ContentId,
    EditEntry,
    ModerationStatus,
    ReactionId,
    ReactionType,
    VisibilityStatus,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        content_id=ContentId(_uuid(row["content_id"])),
        author_id=ActorId(_uuid(row["author_id"])),
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        depth=row["depth"],
        text=row["text"],
        mentions=[ActorId(_uuid(m)) for m in row.get("mentions") or []],
        hashtags=list(row.get("hashtags") or []),
        media_refs=list(row.get("media_refs") or []),
        cohort_level=row.get("cohort_level"),
        cultural_tags=list(row.get("cultural_tags") or []),
        language_code=row.get("language_code"),
        sentiment_score=row.get("sentiment_score"),
        is_anonymous=row["is_anonymous"],
        is_private=row["is_private"],
        reply_count=row["reply_count"],
        like_count=row["like_count"],
        visibility_status=VisibilityStatus(row["visibility_status"]),
        moderation_status=ModerationStatus(row["moderation_status"]),
        is_edited=row["is_edited"],
        edit_count=row["edit_count"],
        edit_history=[
            EditEntry.model_validate(entry) for entry in row.get("edit_history") or []
        ],
        audit_log=[
            AuditEntry.model_validate(entry) for entry in row.get("audit_log") or []
        ],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = comment.model_dump(exclude={"edit_history", "audit_log"})
    data["visibility_status"] = comment.visibility_status.value
    data["moderation_status"] = comment.moderation_status.value
    # JSONB columns hold plain JSON (ISO timestamps, string ids)
    data["edit_history"] = [e.model_dump(mode="json") for e in comment.edit_history]
    data["audit_log"] = [e.model_dump(mode="json") for e in comment.audit_log]
    return data


def row_to_reaction(row: Dict[str, Any]) -> Reaction:
    """Convert database row to Reaction domain model.

    Args:
        row: Database row as dict

    Returns:
        Reaction domain model
    """
    return Reaction(
        id=ReactionId(_uuid(row["id"])),
        content_id=ContentId(_uuid(row["content_id"])),
        actor_id=ActorId(_uuid(row["actor_id"])),
        reaction_type=ReactionType(row["reaction_type"]),
        intensity=row["intensity"],
        cohort_level=row.get("cohort_level"),
        cultural_tags=list(row.get("cultural_tags") or []),
        is_anonymous=row["is_anonymous"],
        is_private=row["is_private"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def reaction_to_dict(reaction: Reaction) -> Dict[str, Any]:
    """Convert Reaction domain model to database dict.

    Args:
        reaction: Reaction domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = reaction.model_dump()
    data["reaction_type"] = reaction.reaction_type.value
    return data
