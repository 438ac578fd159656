"""Signup use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.service import AuthService

from .common import AuthResponse, UserSummary


class SignupRequest(BaseModel):
    """Signup request."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class SignupResponse(AuthResponse):
    """Signup response."""

    pass


class SignupUseCase(BaseUseCase[SignupRequest, SignupResponse]):
    """Use case for registering a new account."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize signup use case.

        Args:
            auth_service: Email/password authentication service
        """
        self.auth_service = auth_service

    async def execute(self, request: SignupRequest) -> SignupResponse:
        """Execute signup flow.

        Returns:
            The new user and a token for them

        Raises:
            ValidationError: If a field is missing or malformed
            ConflictError: If the email is already registered
        """
        with logfire.span("signup.execute"):
            result = await self.auth_service.signup(
                first_name=request.first_name,
                last_name=request.last_name,
                email=request.email,
                password=request.password,
            )
            return SignupResponse(
                user=UserSummary.from_domain(result.user), token=result.token
            )
