"""Delete account use case."""

from board.application.usecase.base import BaseUseCase, SessionRequest, SuccessResponse
from board.domain.service import AccountService


class DeleteAccountRequest(SessionRequest):
    """Delete account request."""


class DeleteAccountUseCase(BaseUseCase):
    """Use case for a member deleting their own account."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize delete account use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: DeleteAccountRequest) -> SuccessResponse:
        """Delete the account and sign the session out.

        Raises:
            StoreError: If the deletion failed
        """
        await self.account_service.delete_account(request.session)
        return SuccessResponse()
