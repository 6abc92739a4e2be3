"""Upload use cases."""

from .upload_media import UploadMediaRequest, UploadMediaResponse, UploadMediaUseCase

__all__ = ["UploadMediaRequest", "UploadMediaResponse", "UploadMediaUseCase"]
