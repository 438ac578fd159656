"""Authentication routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from quill.application.usecase.auth import (
    SigninRequest,
    SigninResponse,
    SigninUseCase,
    SignupRequest,
    SignupResponse,
    SignupUseCase,
)
from quill.domain.error import ConflictError
from quill.interface.api.envelope import SuccessResponse
from quill.interface.error import error_response

router = APIRouter(prefix="/api/auth", tags=["authentication"], route_class=DishkaRoute)


class SignupAPIRequest(BaseModel):
    """API request for registering an account."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class SigninAPIRequest(BaseModel):
    """API request for signing in."""

    email: Optional[str] = None
    password: Optional[str] = None


@router.post(
    "/signup",
    response_model=SuccessResponse[SignupResponse],
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    request: SignupAPIRequest,
    signup_use_case: FromDishka[SignupUseCase],
) -> SuccessResponse[SignupResponse] | JSONResponse:
    """Register a new account and return it with a token.

    A taken email is reported as a bad request rather than a conflict.
    """
    try:
        result = await signup_use_case.execute(
            SignupRequest(**request.model_dump())
        )
    except ConflictError as e:
        logfire.info("Signup rejected for registered email")
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))

    return SuccessResponse[SignupResponse](data=result)


@router.post("/signin", response_model=SuccessResponse[SigninResponse])
async def signin(
    request: SigninAPIRequest,
    signin_use_case: FromDishka[SigninUseCase],
) -> SuccessResponse[SigninResponse]:
    """Sign in with email and password."""
    result = await signin_use_case.execute(SigninRequest(**request.model_dump()))
    return SuccessResponse[SigninResponse](data=result)
