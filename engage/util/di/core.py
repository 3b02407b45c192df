"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from engage.config import (
    AggregationSettings,
    CommentSettings,
    ModerationSettings,
    Settings,
)
from engage.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment limits."""
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_moderation_settings(self, settings: Settings) -> ModerationSettings:
        """Provide moderation policy."""
        return settings.moderation

    @provide(scope=Scope.APP)
    def provide_aggregation_settings(self, settings: Settings) -> AggregationSettings:
        """Provide statistics windows and limits."""
        return settings.aggregation
