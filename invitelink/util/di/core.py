"""Core DI providers."""

from dishka import Scope, provide

from invitelink.config import LinkSettings, Settings
from invitelink.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_link_settings(self, settings: Settings) -> LinkSettings:
        """Provide invitation link settings."""
        return settings.link
