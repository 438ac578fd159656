"""Unit tests for SigninUseCase."""

import pytest

from quill.application.usecase.auth import (
    SigninRequest,
    SigninUseCase,
    SignupRequest,
    SignupUseCase,
)
from quill.domain.error import UnauthorizedError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _register(unit_env) -> None:
    signup = await unit_env.get(SignupUseCase)
    await signup.execute(
        SignupRequest(
            first_name="John",
            last_name="Doe",
            email="john@example.com",
            password="password123",
        )
    )


class TestSigninUseCase:
    """Tests for SigninUseCase."""

    @pytest.mark.asyncio
    async def test_signin_success(self, unit_env):
        """Correct credentials give a token."""
        # Arrange
        await _register(unit_env)
        use_case = await unit_env.get(SigninUseCase)

        # Act
        response = await use_case.execute(
            SigninRequest(email="john@example.com", password="password123")
        )

        # Assert
        assert response.token
        assert response.user.email == "john@example.com"

    @pytest.mark.asyncio
    async def test_signin_wrong_password(self, unit_env):
        """Wrong passwords are unauthorized."""
        # Arrange
        await _register(unit_env)
        use_case = await unit_env.get(SigninUseCase)

        # Act & Assert
        with pytest.raises(UnauthorizedError):
            await use_case.execute(
                SigninRequest(email="john@example.com", password="wrongpassword")
            )
