"""Session use cases."""

from .start_session import StartSessionRequest, StartSessionResponse, StartSessionUseCase

__all__ = ["StartSessionRequest", "StartSessionResponse", "StartSessionUseCase"]
