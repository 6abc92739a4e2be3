"""Upload media use case."""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from board.application.usecase.base import BaseUseCase
from board.domain.service import MediaService


class UploadMediaRequest(BaseModel):
    """Upload media request."""

    data: bytes
    filename: Optional[str] = None
    content_type: Optional[str] = None


class UploadMediaResponse(BaseModel):
    """Public location of the uploaded file."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    url: str
    mime_type: str


class UploadMediaUseCase(BaseUseCase):
    """Use case for uploading an image to attach to a thread."""

    def __init__(self, media_service: MediaService) -> None:
        """Initialize upload media use case.

        Args:
            media_service: Media domain service
        """
        self.media_service = media_service

    def require_configured(self) -> None:
        """Raise ConfigurationError before the request body is read."""
        self.media_service.require_configured()

    async def execute(self, request: UploadMediaRequest) -> UploadMediaResponse:
        """Upload the file.

        Raises:
            ConfigurationError: If storage is not configured
            ValidationError: If the file is too large
            MediaStorageError: If the upload failed
        """
        uploaded = await self.media_service.upload(
            request.data, request.filename, request.content_type
        )
        return UploadMediaResponse(url=uploaded.url, mime_type=uploaded.mime_type)
