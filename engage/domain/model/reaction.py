"""Reaction entity.

Each actor holds at most one live reaction per content item. Reacting again
replaces the existing record in place instead of adding a second one.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from engage.domain.model.common import DomainModel, utcnow
from engage.domain.value import (
    MAX_INTENSITY,
    MIN_INTENSITY,
    ActorId,
    ContentId,
    ReactionId,
    ReactionType,
)


class Reaction(DomainModel):
    """Reaction entity.

    Business rules:
    - One reaction per (content_id, actor_id), enforced by a unique constraint
    - A replace keeps id, created_at and the context tags of the first write
    - content_id may reference a comment (a comment "like" is a LIKE reaction)
    """

    id: ReactionId
    content_id: ContentId
    actor_id: ActorId
    reaction_type: ReactionType
    intensity: int = Field(default=MIN_INTENSITY, ge=MIN_INTENSITY, le=MAX_INTENSITY)
    cohort_level: Optional[int] = Field(default=None, ge=0)
    cultural_tags: list[str] = Field(default_factory=list)
    is_anonymous: bool = False
    is_private: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
