"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from bookofmemes.config import AuthSettings, CommentSettings, FeedSettings, Settings
from bookofmemes.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_feed_settings(self, settings: Settings) -> FeedSettings:
        """Provide feed settings."""
        return settings.feed

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment display settings."""
        return settings.comments
