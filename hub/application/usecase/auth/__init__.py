"""Authentication and account use cases."""

from .change_password import ChangePasswordRequest, ChangePasswordUseCase
from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .get_stats import GetStatsRequest, GetStatsResponse, GetStatsUseCase
from .login import AuthResponse, LoginRequest, LoginUseCase
from .profile import ProfileInput
from .register import RegisterRequest, RegisterUseCase
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase

__all__ = [
    "AuthResponse",
    "ChangePasswordRequest",
    "ChangePasswordUseCase",
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "GetStatsRequest",
    "GetStatsResponse",
    "GetStatsUseCase",
    "LoginRequest",
    "LoginUseCase",
    "ProfileInput",
    "RegisterRequest",
    "RegisterUseCase",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
]
