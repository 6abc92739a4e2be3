"""Infrastructure providers."""

# Import bases
from .storage import StorageProvider
from .store import StoreProvider

# Import implementations (needed for __subclasses__())
from .storage import ProdStorageProvider  # noqa: F401
from .store import ProdStoreProvider  # noqa: F401

__all__ = [
    "ProdStorageProvider",
    "ProdStoreProvider",
    "StorageProvider",
    "StoreProvider",
]
