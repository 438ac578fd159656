"""Caller identity from the Authorization header."""

from typing import Optional

import logfire

from quill.domain.error import UnauthorizedError
from quill.domain.service import JWTService
from quill.domain.value import UserId

INVALID_TOKEN = "Invalid or expired token"


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Extract the token from ``Bearer <token>``, or None."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def resolve_caller(
    authorization: Optional[str], jwt_service: JWTService
) -> Optional[UserId]:
    """Resolve the caller for a public route; anything unusable is anonymous."""
    return jwt_service.get_user_id_from_token(bearer_token(authorization))


def require_caller(authorization: Optional[str], jwt_service: JWTService) -> UserId:
    """Resolve the caller for a protected route.

    Raises:
        UnauthorizedError: If the header is missing, or the token is invalid
            or expired
    """
    if bearer_token(authorization) is None:
        raise UnauthorizedError()

    caller_id = resolve_caller(authorization, jwt_service)
    if caller_id is None:
        logfire.info("Rejected request with unusable token")
        raise UnauthorizedError(INVALID_TOKEN)
    return caller_id
