"""Object storage infrastructure providers."""

from dishka import Scope, provide

from board.adapter.storage import MinioMediaStorage
from board.config import StorageSettings
from board.domain.service import MediaStorage
from board.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Object storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production object storage provider (S3-compatible bucket)."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_media_storage(self, settings: StorageSettings) -> MediaStorage:
        """Provide media storage client."""
        return MinioMediaStorage(settings)
