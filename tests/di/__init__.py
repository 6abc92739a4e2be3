"""Mock providers for testing."""

from .storage import MockStorageProvider
from .store import MockStoreProvider
from .container import build_test_container

__all__ = [
    "MockStorageProvider",
    "MockStoreProvider",
    "build_test_container",
]
