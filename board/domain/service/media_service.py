"""Media upload domain service."""

import re
import uuid
from abc import ABC, abstractmethod
from typing import Optional

import logfire
from pydantic import BaseModel

from board.domain.error import ValidationError
from board.util.error import ConfigurationError

from .base import Service

DEFAULT_MIME_TYPE = "application/octet-stream"
DEFAULT_FILENAME = "upload.bin"

_EXTENSION = re.compile(r"\.[a-zA-Z0-9]+$")


class MediaStorageError(Exception):
    """Raised when the object storage rejects or fails an upload."""

    pass


class MediaStorage(ABC):
    """Interface to the object storage bucket.

    Implementations live in the adapter layer.
    """

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether endpoint, credentials and bucket are all set."""
        pass

    @property
    @abstractmethod
    def public_base_url(self) -> Optional[str]:
        """Base URL objects are served from."""
        pass

    @abstractmethod
    async def put(self, key: str, data: bytes, content_type: str) -> None:
        """Store an object.

        Raises:
            MediaStorageError: If the upload failed
        """
        pass


class UploadedMedia(BaseModel):
    """Result of an upload."""

    key: str
    url: str
    mime_type: str


def object_key(filename: Optional[str]) -> str:
    """Random object key keeping the original file extension.

    Example: ``threads/1b4e28ba-2fa1-11d2-883f-0016d3cca427.png``
    """
    match = _EXTENSION.search(filename or DEFAULT_FILENAME)
    extension = match.group(0) if match else ""
    return f"threads/{uuid.uuid4()}{extension}"


class MediaService(Service):
    """Domain service for media uploads."""

    def __init__(self, storage: MediaStorage, max_upload_bytes: int) -> None:
        """Initialize media service.

        Args:
            storage: Object storage client
            max_upload_bytes: Largest accepted upload
        """
        self.storage = storage
        self.max_upload_bytes = max_upload_bytes

    def require_configured(self) -> str:
        """Check uploads can be served before reading the request body.

        Returns:
            Public base URL without a trailing slash

        Raises:
            ConfigurationError: With a caller-safe message
        """
        if not self.storage.is_configured:
            raise ConfigurationError("R2 is not configured on the server.")
        base = self.storage.public_base_url
        if not base:
            raise ConfigurationError("R2 public base URL is not configured.")
        return base.removesuffix("/")

    async def upload(
        self,
        data: bytes,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> UploadedMedia:
        """Upload a file and return its public URL.

        Raises:
            ConfigurationError: If storage is not configured
            ValidationError: If the file is too large
            MediaStorageError: If the upload failed
        """
        base = self.require_configured()

        if len(data) > self.max_upload_bytes:
            limit_mb = self.max_upload_bytes // (1024 * 1024)
            raise ValidationError(f"Files must be {limit_mb} MB or smaller.")

        mime_type = content_type or DEFAULT_MIME_TYPE
        key = object_key(filename)

        with logfire.span(
            "media_service.upload", key=key, mime_type=mime_type, size=len(data)
        ):
            try:
                await self.storage.put(key, data, mime_type)
            except MediaStorageError as e:
                logfire.error("Upload failed", key=key, error=str(e))
                raise

            logfire.info("Media uploaded", key=key)
            return UploadedMedia(key=key, url=f"{base}/{key}", mime_type=mime_type)
