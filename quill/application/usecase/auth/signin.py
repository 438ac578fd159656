"""Signin use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.service import AuthService

from .common import AuthResponse, UserSummary


class SigninRequest(BaseModel):
    """Signin request."""

    email: Optional[str] = None
    password: Optional[str] = None


class SigninResponse(AuthResponse):
    """Signin response."""

    pass


class SigninUseCase(BaseUseCase[SigninRequest, SigninResponse]):
    """Use case for signing in with email and password."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: SigninRequest) -> SigninResponse:
        """Execute signin flow.

        Raises:
            ValidationError: If email or password is missing
            UnauthorizedError: If the credentials don't match
        """
        with logfire.span("signin.execute"):
            result = await self.auth_service.signin(
                email=request.email, password=request.password
            )
            return SigninResponse(
                user=UserSummary.from_domain(result.user), token=result.token
            )
