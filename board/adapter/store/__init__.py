"""Managed store (REST/RPC/auth) adapter."""

from .auth import MockStoreIdentityProvider, RealStoreIdentityProvider
from .client import StoreClient

__all__ = [
    "MockStoreIdentityProvider",
    "RealStoreIdentityProvider",
    "StoreClient",
]
