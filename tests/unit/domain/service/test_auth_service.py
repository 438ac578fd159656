"""Unit tests for AuthService."""

import pytest

from quill.domain.error import ConflictError, UnauthorizedError, ValidationError
from quill.domain.repository import UserRepository
from quill.domain.service import AuthService, JWTService
from quill.domain.value import Email
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _signup(auth_service: AuthService, email: str = "john@example.com"):
    return await auth_service.signup(
        first_name="John", last_name="Doe", email=email, password="password123"
    )


class TestSignup:
    """Tests for signup."""

    @pytest.mark.asyncio
    async def test_signup_creates_user_and_token(self, unit_env):
        """Signup stores the user with a hashed password and issues a token."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        user_repo = await unit_env.get(UserRepository)
        jwt_service = await unit_env.get(JWTService)

        # Act
        result = await _signup(auth_service, email="John@Example.com")

        # Assert
        assert result.user.email.root == "john@example.com"
        assert result.user.password_hash != "password123"
        assert jwt_service.get_user_id_from_token(result.token) == result.user.id
        stored = await user_repo.find_by_email(Email("john@example.com"))
        assert stored == result.user

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, unit_env):
        """Emails are unique regardless of case."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        await _signup(auth_service, email="john@example.com")

        # Act & Assert
        with pytest.raises(ConflictError):
            await _signup(auth_service, email="JOHN@example.com")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "fields",
        [
            {"first_name": "", "last_name": "Doe", "email": "a@b.com", "password": "secret1"},
            {"first_name": "John", "last_name": None, "email": "a@b.com", "password": "secret1"},
            {"first_name": "John", "last_name": "Doe", "email": "invalid", "password": "secret1"},
            {"first_name": "John", "last_name": "Doe", "email": None, "password": "secret1"},
            {"first_name": "John", "last_name": "Doe", "email": "a@b.com", "password": "123"},
        ],
    )
    async def test_invalid_signup_is_rejected(self, unit_env, fields):
        """Missing names, malformed emails and short passwords are rejected."""
        # Arrange
        auth_service = await unit_env.get(AuthService)

        # Act & Assert
        with pytest.raises(ValidationError):
            await auth_service.signup(**fields)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "first_name,last_name", [("J" * 101, "Doe"), ("John", "D" * 101)]
    )
    async def test_overlong_name_is_rejected(self, unit_env, first_name, last_name):
        """Names over 100 characters are a validation error and no user is stored."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        user_repo = await unit_env.get(UserRepository)

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await auth_service.signup(
                first_name=first_name,
                last_name=last_name,
                email="john@example.com",
                password="password123",
            )

        assert "100 characters" in str(exc_info.value)
        assert await user_repo.find_by_email(Email("john@example.com")) is None


class TestSignin:
    """Tests for signin."""

    @pytest.mark.asyncio
    async def test_signin_with_correct_password(self, unit_env):
        """Correct credentials return the user and a fresh token."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        signup = await _signup(auth_service)

        # Act
        result = await auth_service.signin("JOHN@example.com", "password123")

        # Assert
        assert result.user.id == signup.user.id
        assert result.token

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_fail_alike(self, unit_env):
        """Both failures give the same message."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        await _signup(auth_service)

        # Act
        with pytest.raises(UnauthorizedError) as wrong_password:
            await auth_service.signin("john@example.com", "wrongpassword")
        with pytest.raises(UnauthorizedError) as unknown_email:
            await auth_service.signin("nobody@example.com", "password123")

        # Assert
        assert str(wrong_password.value) == str(unknown_email.value)
        assert str(wrong_password.value) == "Invalid email or password"

    @pytest.mark.asyncio
    async def test_missing_password_is_validation_error(self, unit_env):
        """Signin without a password never reaches the store."""
        # Arrange
        auth_service = await unit_env.get(AuthService)

        # Act & Assert
        with pytest.raises(ValidationError):
            await auth_service.signin("john@example.com", None)
