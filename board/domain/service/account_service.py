"""Account domain service."""

import logfire

from board.domain.error import StoreError
from board.domain.model import SessionContext

from .base import Service
from .session_service import IdentityProvider


class AccountService(Service):
    """Domain service for account lifecycle."""

    def __init__(self, identity_provider: IdentityProvider) -> None:
        """Initialize account service.

        Args:
            identity_provider: Store auth service client
        """
        self.identity_provider = identity_provider

    async def delete_account(self, session: SessionContext) -> None:
        """Delete the session user's account and sign the session out.

        Threads and comments the user wrote are kept and shown as anonymous.

        Raises:
            StoreError: If the store refused the deletion
        """
        user_id = session.user_id
        with logfire.span("account_service.delete_account", user_id=str(user_id)):
            try:
                await self.identity_provider.delete_user(user_id)
            except StoreError as e:
                logfire.error(
                    "Failed to delete user", user_id=str(user_id), error=str(e)
                )
                raise

            session.sign_out()
            logfire.info("Account deleted", user_id=str(user_id))
