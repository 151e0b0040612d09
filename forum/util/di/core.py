"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from forum.config import ForumSettings, Settings
from forum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings loaded from environment variables and the .env file."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_forum_settings(self, settings: Settings) -> ForumSettings:
        """Provide forum behaviour settings."""
        return settings.forum
