"""Invite use cases."""

from .enforce_invite import EnforceInviteRequest, EnforceInviteUseCase

__all__ = ["EnforceInviteRequest", "EnforceInviteUseCase"]
