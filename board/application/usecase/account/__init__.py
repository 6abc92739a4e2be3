"""Account use cases."""

from .delete_account import DeleteAccountRequest, DeleteAccountUseCase

__all__ = ["DeleteAccountRequest", "DeleteAccountUseCase"]
