"""Authentication use cases."""

from .common import AuthResponse, UserSummary
from .signin import SigninRequest, SigninResponse, SigninUseCase
from .signup import SignupRequest, SignupResponse, SignupUseCase

__all__ = [
    "AuthResponse",
    "SigninRequest",
    "SigninResponse",
    "SigninUseCase",
    "SignupRequest",
    "SignupResponse",
    "SignupUseCase",
    "UserSummary",
]
