"""Email/password authentication domain service."""

import asyncio
from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as ModelValidationError

from quill.config import PasswordSettings
from quill.domain.error import ConflictError, UnauthorizedError, ValidationError
from quill.domain.model import User
from quill.domain.model.common import utc_now
from quill.domain.repository import UserRepository
from quill.domain.value import Email, UserId
from quill.util.password import PasswordHasher

from .jwt_service import JWTService

INVALID_CREDENTIALS = "Invalid email or password"


@dataclass
class AuthResult:
    """An authenticated user and their access token."""

    user: User
    token: str


def _parse_email(raw: Optional[str]) -> Email:
    if not raw or not raw.strip():
        raise ValidationError("Email is required")
    try:
        return Email(raw)
    except ModelValidationError:
        raise ValidationError("Email must be a valid address")


def _build_user(fields: dict[str, object]) -> User:
    """Validate ``fields`` into a User, surfacing failures as domain errors."""
    try:
        return User.model_validate(fields)
    except ModelValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "user"
        raise ValidationError(f"{location}: {first['msg']}") from e


class AuthService:
    """Domain service for signing users up and in."""

    def __init__(
        self,
        user_repository: UserRepository,
        jwt_service: JWTService,
        password_hasher: PasswordHasher,
        password_settings: PasswordSettings,
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            jwt_service: Token issuer
            password_hasher: Password hashing
            password_settings: Password rules
        """
        self.user_repository = user_repository
        self.jwt_service = jwt_service
        self.password_hasher = password_hasher
        self.password_settings = password_settings

    def _issue(self, user: User) -> AuthResult:
        token = self.jwt_service.create_token(str(user.id), user.email.root)
        return AuthResult(user=user, token=token)

    async def signup(
        self,
        first_name: Optional[str],
        last_name: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> AuthResult:
        """Register a new user.

        Raises:
            ValidationError: If a field is missing or malformed
            ConflictError: If the email is already registered
        """
        if not first_name or not first_name.strip():
            raise ValidationError("First name is required")
        if not last_name or not last_name.strip():
            raise ValidationError("Last name is required")
        normalised = _parse_email(email)
        if not password or len(password) < self.password_settings.min_length:
            raise ValidationError(
                f"Password must be at least {self.password_settings.min_length} characters"
            )

        with logfire.span("auth_service.signup", email=normalised.root):
            if await self.user_repository.find_by_email(normalised):
                logfire.warn("Signup with registered email", email=normalised.root)
                raise ConflictError("User", "email", normalised.root)

            password_hash = await asyncio.to_thread(self.password_hasher.hash, password)
            now = utc_now()
            user = _build_user(
                {
                    "id": UserId(uuid4()),
                    "first_name": first_name.strip(),
                    "last_name": last_name.strip(),
                    "email": normalised,
                    "password_hash": password_hash,
                    "created_at": now,
                    "updated_at": now,
                }
            )
            saved = await self.user_repository.insert(user)

            logfire.info("User registered", user_id=str(saved.id))
            return self._issue(saved)

    async def signin(self, email: Optional[str], password: Optional[str]) -> AuthResult:
        """Authenticate a user by email and password.

        Unknown emails and wrong passwords fail the same way.

        Raises:
            ValidationError: If email or password is missing
            UnauthorizedError: If the credentials don't match
        """
        normalised = _parse_email(email)
        if not password:
            raise ValidationError("Password is required")

        with logfire.span("auth_service.signin", email=normalised.root):
            user = await self.user_repository.find_by_email(normalised)
            if user is None:
                logfire.warn("Signin for unknown email", email=normalised.root)
                raise UnauthorizedError(INVALID_CREDENTIALS)

            matches = await asyncio.to_thread(
                self.password_hasher.verify, password, user.password_hash
            )
            if not matches:
                logfire.warn("Signin with wrong password", user_id=str(user.id))
                raise UnauthorizedError(INVALID_CREDENTIALS)

            logfire.info("User signed in", user_id=str(user.id))
            return self._issue(user)
