"""S3-compatible object storage client (Cloudflare R2 via MinIO SDK)."""

import asyncio
from io import BytesIO
from typing import Optional
from urllib.parse import urlsplit

import logfire
from minio import Minio
from minio.error import MinioException

from board.config import StorageSettings
from board.domain.service.media_service import MediaStorage, MediaStorageError


class MinioMediaStorage(MediaStorage):
    """Media storage on an S3-compatible bucket."""

    def __init__(self, settings: StorageSettings) -> None:
        """Initialize storage client.

        The MinIO client is created lazily so that a missing configuration
        only fails uploads, not application start-up.

        Args:
            settings: Storage settings
        """
        self.settings = settings
        self._client: Minio | None = None

    @property
    def is_configured(self) -> bool:
        return self.settings.is_configured

    @property
    def public_base_url(self) -> Optional[str]:
        return self.settings.public_base_url

    def _get_client(self) -> Minio:
        """Lazy initialization of MinIO client."""
        if self._client is None:
            endpoint = urlsplit(self.settings.endpoint)
            # MinIO wants host[:port]; a bare host parses as a path
            host = endpoint.netloc or endpoint.path
            self._client = Minio(
                endpoint=host,
                access_key=self.settings.access_key_id,
                secret_key=self.settings.secret_access_key,
                secure=endpoint.scheme != "http",
                region=self.settings.region,
            )
        return self._client

    def _put(self, key: str, data: bytes, content_type: str) -> None:
        self._get_client().put_object(
            bucket_name=self.settings.bucket_name,
            object_name=key,
            data=BytesIO(data),
            length=len(data),
            content_type=content_type,
        )

    async def put(self, key: str, data: bytes, content_type: str) -> None:
        try:
            # The SDK is blocking
            await asyncio.to_thread(self._put, key, data, content_type)
        except (MinioException, OSError, ValueError) as e:
            logfire.error("Object upload failed", key=key, error=str(e))
            raise MediaStorageError(str(e)) from e
        logfire.info("Uploaded object", bucket=self.settings.bucket_name, key=key)


class MockMediaStorage(MediaStorage):
    """In-memory media storage for testing."""

    def __init__(self, public_base_url: Optional[str] = "https://media.test/") -> None:
        self.objects: dict[str, tuple[bytes, str]] = {}
        self.configured = True
        self.fail_uploads = False
        self._public_base_url = public_base_url

    @property
    def is_configured(self) -> bool:
        return self.configured

    @property
    def public_base_url(self) -> Optional[str]:
        return self._public_base_url

    @public_base_url.setter
    def public_base_url(self, value: Optional[str]) -> None:
        self._public_base_url = value

    async def put(self, key: str, data: bytes, content_type: str) -> None:
        if self.fail_uploads:
            raise MediaStorageError("mock failure")
        self.objects[key] = (data, content_type)
