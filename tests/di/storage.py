"""Mock object storage providers for testing."""

from dishka import Scope, provide

from board.adapter.storage import MockMediaStorage
from board.domain.service import MediaStorage
from board.util.di.infrastructure.storage import StorageProvider


class MockStorageProvider(StorageProvider):
    """Mock object storage provider keeping uploads in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mock_media_storage(self) -> MockMediaStorage:
        """Provide in-memory media storage."""
        return MockMediaStorage()

    @provide(scope=Scope.APP)
    def get_media_storage(self, storage: MockMediaStorage) -> MediaStorage:
        """Expose the in-memory storage under its interface."""
        return storage
