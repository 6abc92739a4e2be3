"""Unit tests for the media domain service."""

import re

import pytest

from board.adapter.storage import MockMediaStorage
from board.domain.error import ValidationError
from board.domain.service import MediaService, MediaStorageError
from board.util.error import ConfigurationError

KEY = re.compile(r"^threads/[0-9a-f-]{36}(\.[A-Za-z0-9]+)?$")


class TestMediaService:
    """Unit tests for MediaService."""

    @pytest.fixture
    def storage(self) -> MockMediaStorage:
        return MockMediaStorage(public_base_url="https://media.example.org/")

    @pytest.fixture
    def service(self, storage) -> MediaService:
        return MediaService(storage=storage, max_upload_bytes=5 * 1024 * 1024)

    @pytest.mark.asyncio
    async def test_upload_keeps_extension_and_builds_public_url(self, service, storage):
        # Act
        uploaded = await service.upload(b"\x89PNG", "figure 1.PNG", "image/png")

        # Assert
        assert KEY.match(uploaded.key)
        assert uploaded.key.endswith(".PNG")
        assert uploaded.url == f"https://media.example.org/{uploaded.key}"
        assert uploaded.mime_type == "image/png"
        assert storage.objects[uploaded.key] == (b"\x89PNG", "image/png")

    @pytest.mark.asyncio
    async def test_upload_defaults(self, service):
        uploaded = await service.upload(b"data", None, None)

        assert uploaded.key.endswith(".bin")
        assert uploaded.mime_type == "application/octet-stream"

    @pytest.mark.asyncio
    async def test_filename_without_extension(self, service):
        uploaded = await service.upload(b"data", "README", "text/plain")

        assert KEY.match(uploaded.key)
        assert "." not in uploaded.key

    @pytest.mark.asyncio
    async def test_rejects_large_files(self, service, storage):
        with pytest.raises(ValidationError, match="5 MB"):
            await service.upload(b"x" * (5 * 1024 * 1024 + 1), "big.png", "image/png")

        assert storage.objects == {}

    @pytest.mark.asyncio
    async def test_storage_failure_propagates(self, service, storage):
        storage.fail_uploads = True

        with pytest.raises(MediaStorageError):
            await service.upload(b"data", "a.png", "image/png")

    def test_require_configured(self, service, storage):
        assert service.require_configured() == "https://media.example.org"

        storage.public_base_url = None
        with pytest.raises(ConfigurationError, match="R2 public base URL"):
            service.require_configured()

        storage.configured = False
        with pytest.raises(ConfigurationError, match="R2 is not configured"):
            service.require_configured()
