"""Test configuration and helpers."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from engage.domain.model import Comment, Reaction
from engage.domain.value import (
    Actor,
    ActorId,
    CommentId,
    ContentId,
    ReactionId,
    ReactionType,
)


def new_actor(is_moderator: bool = False) -> Actor:
    """A fresh actor identity."""
    return Actor(id=ActorId(uuid4()), is_moderator=is_moderator)


def days_ago(days: float) -> datetime:
    return datetime.now(timezone.utc) - timedelta(days=days)


def make_comment(
    content_id: ContentId,
    author_id: ActorId | None = None,
    text: str = "A comment",
    **fields,
) -> Comment:
    """Build a comment record for seeding repositories directly."""
    return Comment(
        id=CommentId(uuid4()),
        content_id=content_id,
        author_id=author_id or ActorId(uuid4()),
        text=text,
        **fields,
    )


def make_reaction(
    content_id: ContentId,
    reaction_type: ReactionType = ReactionType.LIKE,
    intensity: int = 1,
    actor_id: ActorId | None = None,
    **fields,
) -> Reaction:
    """Build a reaction record for seeding repositories directly."""
    return Reaction(
        id=ReactionId(uuid4()),
        content_id=content_id,
        actor_id=actor_id or ActorId(uuid4()),
        reaction_type=reaction_type,
        intensity=intensity,
        **fields,
    )
