"""Application configuration."""

from pathlib import Path
from typing import Literal
from pydantic import BaseModel, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseModel):
    """Managed relational store configuration.

    The store exposes a REST/RPC surface (``/rest/v1``) and an auth surface
    (``/auth/v1``). Row-level security is applied to every call made with a
    user's access token.
    """

    url: str | None = None

    # Public (anon) key, sent as ``apikey`` on every request
    anon_key: str | None = None

    # Service-role key, only needed for account deletion
    service_role_key: str | None = None

    timeout_seconds: float = 10.0

    @property
    def is_configured(self) -> bool:
        """Whether the user-facing surface can be reached."""
        return bool(self.url and self.anon_key)

    @property
    def has_service_role(self) -> bool:
        """Whether privileged (service-role) calls can be made."""
        return self.is_configured and bool(self.service_role_key)


class StorageSettings(BaseModel):
    """S3-compatible object storage configuration (Cloudflare R2)."""

    # Endpoint URL, e.g. https://<account>.r2.cloudflarestorage.com
    endpoint: str | None = None
    access_key_id: str | None = None
    secret_access_key: str | None = None
    bucket_name: str | None = None
    region: str = "auto"

    # Base URL objects are served from once uploaded
    public_base_url: str | None = None

    # Largest accepted upload (5 MB)
    max_upload_bytes: int = 5 * 1024 * 1024

    @property
    def is_configured(self) -> bool:
        """Whether uploads can be sent to the bucket."""
        return bool(
            self.endpoint
            and self.access_key_id
            and self.secret_access_key
            and self.bucket_name
        )


class ForumSettings(BaseModel):
    """Forum behaviour configuration."""

    # Comments deeper than this are rendered without additional indentation
    max_nesting_depth: int = 6

    title_max_length: int = 140
    comment_max_length: int = 10000

    # Number of recent threads/comments shown on the moderation dashboard
    moderation_page_size: int = 50


class APISettings(BaseModel):
    """API configuration."""

    host: str
    port: int
    protocol: Literal["http", "https"]
    frontend_host: str

    @computed_field
    @property
    def base_url(self) -> str:
        """Construct base URL from host.

        In development: http://localhost:8000
        In production: https://<host>
        """
        if self.host == "localhost":
            return f"{self.protocol}://{self.host}:{self.port}"
        else:
            # Production uses standard ports (80/443)
            return f"{self.protocol}://{self.host}"

    @computed_field
    @property
    def frontend_url(self) -> str:
        """Frontend URL, used for CORS.

        In development: http://localhost:3000
        """
        if self.frontend_host == "localhost":
            return "http://localhost:3000"
        else:
            return f"{self.protocol}://{self.frontend_host}"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # If None, sends when a token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, nested values use ``__``:

        STORE__URL=https://<project>.supabase.co
        STORE__ANON_KEY=...
        STORE__SERVICE_ROLE_KEY=...
        STORAGE__ENDPOINT=https://<account>.r2.cloudflarestorage.com
        STORAGE__BUCKET_NAME=media
        STORAGE__PUBLIC_BASE_URL=https://media.example.com
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows STORE__URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    host: str = "localhost"
    port: int = 8000
    frontend_host: str = "localhost"

    # Nested settings
    store: StoreSettings = StoreSettings()
    storage: StorageSettings = StorageSettings()
    forum: ForumSettings = ForumSettings()
    api: APISettings = APISettings(
        host="localhost", port=8000, protocol="http", frontend_host="localhost"
    )  # Overwritten in validator
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_api_settings(self) -> "Settings":
        """Initialize API settings from host and environment."""
        protocol: Literal["http", "https"] = (
            "http" if self.environment in ("test", "development") else "https"
        )

        self.api = APISettings(
            host=self.host,
            port=self.port,
            protocol=protocol,
            frontend_host=self.frontend_host,
        )

        self.git_sha = self._load_git_sha()

        return self

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        return "unknown"
