"""Domain services."""

from .aggregation_service import AggregationService
from .base import Service
from .comment_service import CommentChanges, CommentService
from .discovery_service import DiscoveryService
from .moderation_service import ModerationService
from .reaction_service import ReactionService

__all__ = [
    "AggregationService",
    "CommentChanges",
    "CommentService",
    "DiscoveryService",
    "ModerationService",
    "ReactionService",
    "Service",
]
