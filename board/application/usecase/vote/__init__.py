"""Vote use cases."""

from .toggle_vote import ToggleVoteRequest, ToggleVoteResponse, ToggleVoteUseCase

__all__ = ["ToggleVoteRequest", "ToggleVoteResponse", "ToggleVoteUseCase"]
