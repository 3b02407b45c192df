"""Strongly typed identifiers for engagement entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Engagement records
CommentId = NewType("CommentId", UUID)
ReactionId = NewType("ReactionId", UUID)

# External references (owned by other services)
ContentId = NewType("ContentId", UUID)
ActorId = NewType("ActorId", UUID)
