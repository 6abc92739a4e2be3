"""Unit tests for the MinIO-backed media storage."""

from unittest.mock import MagicMock, patch

import pytest
from minio.error import MinioException

from board.adapter.storage import MinioMediaStorage
from board.config import StorageSettings
from board.domain.service import MediaStorageError


@pytest.fixture
def settings() -> StorageSettings:
    return StorageSettings(
        endpoint="https://account.r2.cloudflarestorage.com",
        access_key_id="key",
        secret_access_key="secret",
        bucket_name="board-media",
        public_base_url="https://media.example.org",
    )


class TestMinioMediaStorage:
    """Unit tests for MinioMediaStorage."""

    def test_unconfigured_without_bucket(self, settings):
        settings.bucket_name = None

        assert MinioMediaStorage(settings).is_configured is False

    def test_client_built_from_endpoint(self, settings):
        with patch("board.adapter.storage.client.Minio") as minio_cls:
            MinioMediaStorage(settings)._get_client()

        minio_cls.assert_called_once_with(
            endpoint="account.r2.cloudflarestorage.com",
            access_key="key",
            secret_key="secret",
            secure=True,
            region="auto",
        )

    @pytest.mark.asyncio
    async def test_put_uploads_object(self, settings):
        client = MagicMock()
        with patch("board.adapter.storage.client.Minio", return_value=client):
            await MinioMediaStorage(settings).put("threads/a.png", b"png", "image/png")

        kwargs = client.put_object.call_args.kwargs
        assert kwargs["bucket_name"] == "board-media"
        assert kwargs["object_name"] == "threads/a.png"
        assert kwargs["length"] == 3
        assert kwargs["content_type"] == "image/png"

    @pytest.mark.asyncio
    async def test_sdk_failure_becomes_storage_error(self, settings):
        client = MagicMock()
        client.put_object.side_effect = MinioException("bucket missing")
        with patch("board.adapter.storage.client.Minio", return_value=client):
            with pytest.raises(MediaStorageError):
                await MinioMediaStorage(settings).put("k", b"x", "image/png")
