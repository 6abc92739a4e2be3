"""Object storage adapter."""

from .client import MinioMediaStorage, MockMediaStorage

__all__ = ["MinioMediaStorage", "MockMediaStorage"]
