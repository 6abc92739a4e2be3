"""Profile use cases."""

from .get_profile import (
    GetOwnProfileRequest,
    GetOwnProfileUseCase,
    GetPublicProfileRequest,
    GetPublicProfileUseCase,
)
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase
from .views import ProfileView

__all__ = [
    "GetOwnProfileRequest",
    "GetOwnProfileUseCase",
    "GetPublicProfileRequest",
    "GetPublicProfileUseCase",
    "ProfileView",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
]
