"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from board.config import ForumSettings, Settings, StorageSettings, StoreSettings
from board.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_store_settings(self, settings: Settings) -> StoreSettings:
        """Provide store settings."""
        return settings.store

    @provide(scope=Scope.APP)
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        """Provide object storage settings."""
        return settings.storage

    @provide(scope=Scope.APP)
    def provide_forum_settings(self, settings: Settings) -> ForumSettings:
        """Provide forum settings."""
        return settings.forum
