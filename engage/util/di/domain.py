"""Domain layer DI providers."""

from dishka import Scope, provide

from engage.config import AggregationSettings, CommentSettings, ModerationSettings
from engage.domain.repository import CommentRepository, ReactionRepository
from engage.domain.service import (
    AggregationService,
    CommentService,
    DiscoveryService,
    ModerationService,
    ReactionService,
)
from engage.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_reaction_service(
        self, reaction_repository: ReactionRepository
    ) -> ReactionService:
        """Provide reaction domain service."""
        return ReactionService(reaction_repository=reaction_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        reaction_service: ReactionService,
        comment_settings: CommentSettings,
        moderation_settings: ModerationSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            reaction_service=reaction_service,
            comment_settings=comment_settings,
            moderation_settings=moderation_settings,
        )

    @provide
    def get_moderation_service(
        self, comment_repository: CommentRepository
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(comment_repository=comment_repository)

    @provide
    def get_aggregation_service(
        self,
        reaction_repository: ReactionRepository,
        comment_repository: CommentRepository,
        aggregation_settings: AggregationSettings,
    ) -> AggregationService:
        """Provide aggregation domain service."""
        return AggregationService(
            reaction_repository=reaction_repository,
            comment_repository=comment_repository,
            aggregation_settings=aggregation_settings,
        )

    @provide
    def get_discovery_service(
        self, comment_repository: CommentRepository
    ) -> DiscoveryService:
        """Provide discovery domain service."""
        return DiscoveryService(comment_repository=comment_repository)
