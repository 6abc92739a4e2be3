"""Session domain service.

Turns the ``Authorization`` header of an incoming request into a
``SessionContext``. The store's auth service is the authority on whether a
token is valid; tokens that are visibly expired are rejected locally so no
remote call is made for them.
"""

from abc import ABC, abstractmethod
from typing import Optional

import logfire

from board.domain.error import AuthenticationError
from board.domain.model import AuthUser, SessionContext
from board.domain.value import UserId
from board.util.error import ConfigurationError
from board.util.jwt import ExpiredTokenError, JWTError, read_claims

from .base import Service

MISSING_HEADER = "Missing Authorization header."
INVALID_HEADER = "Invalid Authorization header format."
MISSING_TOKEN = "Missing access token."
INVALID_SESSION = "Invalid or expired session."


class IdentityProvider(ABC):
    """Interface to the store's auth service.

    Implementations live in the adapter layer.
    """

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether user-facing auth calls can be made."""
        pass

    @property
    @abstractmethod
    def can_delete_users(self) -> bool:
        """Whether privileged (service-role) calls can be made."""
        pass

    @abstractmethod
    async def get_user(self, access_token: str) -> Optional[AuthUser]:
        """Resolve the user an access token belongs to.

        Returns:
            The user, or None if the token is not accepted
        """
        pass

    @abstractmethod
    async def delete_user(self, user_id: UserId) -> None:
        """Delete an auth user with service-role privileges.

        The store cascades the deletion to profiles and votes and
        anonymises authored threads and comments.

        Raises:
            StoreError: If the deletion failed
        """
        pass


def parse_bearer(header: Optional[str]) -> str:
    """Extract the access token from an ``Authorization`` header.

    Only the first two space-separated parts are read: the scheme
    (case-insensitive ``bearer``) and the token.

    Raises:
        AuthenticationError: With a caller-safe message
    """
    if not header:
        raise AuthenticationError(MISSING_HEADER)

    parts = header.split(" ")
    scheme = parts[0]
    token = parts[1] if len(parts) > 1 else ""
    if not scheme or scheme.lower() != "bearer" or not token:
        raise AuthenticationError(INVALID_HEADER)

    token = token.strip()
    if not token:
        raise AuthenticationError(MISSING_TOKEN)
    return token


class SessionService(Service):
    """Domain service for request sessions."""

    def __init__(self, identity_provider: IdentityProvider) -> None:
        """Initialize session service.

        Args:
            identity_provider: Store auth service client
        """
        self.identity_provider = identity_provider

    def require_configured(self, service_role: bool = False) -> None:
        """Check the store can be reached before doing any work.

        Args:
            service_role: Whether privileged calls will be needed

        Raises:
            ConfigurationError: If store settings are missing
        """
        if not self.identity_provider.is_configured:
            raise ConfigurationError("Store URL or anon key is not configured")
        if service_role and not self.identity_provider.can_delete_users:
            raise ConfigurationError("Store service-role key is not configured")

    async def authenticate(self, authorization: Optional[str]) -> SessionContext:
        """Build the session for a request.

        Args:
            authorization: Raw ``Authorization`` header value

        Returns:
            Active session context

        Raises:
            AuthenticationError: If the header is malformed or the token is
                not accepted
        """
        token = parse_bearer(authorization)
        return await self.resolve(token)

    async def resolve(self, access_token: str) -> SessionContext:
        """Build the session for an already extracted access token."""
        with logfire.span("session_service.resolve"):
            try:
                read_claims(access_token)
            except ExpiredTokenError:
                logfire.info("Rejected expired access token")
                raise AuthenticationError(INVALID_SESSION)
            except JWTError:
                # Opaque or unreadable: let the store decide
                pass

            user = await self.identity_provider.get_user(access_token)
            if user is None:
                logfire.warn("Access token not accepted by store")
                raise AuthenticationError(INVALID_SESSION)

            return SessionContext(user=user, access_token=access_token)

    async def optional(self, authorization: Optional[str]) -> Optional[SessionContext]:
        """Build the session if a header is present, for pages anyone can read.

        Raises:
            AuthenticationError: If a header is present but not accepted
        """
        if not authorization:
            return None
        return await self.authenticate(authorization)

    def sign_out(self, session: SessionContext) -> None:
        session.sign_out()
