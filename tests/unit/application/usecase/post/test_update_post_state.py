"""Unit tests for UpdatePostStateUseCase."""

from uuid import uuid4

import pytest

from quill.application.usecase.post import (
    UpdatePostStateRequest,
    UpdatePostStateUseCase,
)
from quill.domain.error import ForbiddenError, ValidationError
from quill.domain.repository import PostRepository
from quill.domain.value import PostState, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdatePostStateUseCase:
    """Tests for UpdatePostStateUseCase."""

    @pytest.mark.asyncio
    async def test_publish(self, unit_env):
        """The author publishes a draft."""
        # Arrange
        use_case = await unit_env.get(UpdatePostStateUseCase)
        post_repo = await unit_env.get(PostRepository)
        author_id = UserId(uuid4())
        post = await post_repo.insert(make_post(author_id, state=PostState.DRAFT))

        # Act
        response = await use_case.execute(
            UpdatePostStateRequest(
                post_id=str(post.id), caller_id=str(author_id), state="published"
            )
        )

        # Assert
        assert response.state == "published"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("state", [None, ""])
    async def test_missing_state(self, unit_env, state):
        """A state must be supplied."""
        # Arrange
        use_case = await unit_env.get(UpdatePostStateUseCase)
        post_repo = await unit_env.get(PostRepository)
        author_id = UserId(uuid4())
        post = await post_repo.insert(make_post(author_id, state=PostState.DRAFT))

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                UpdatePostStateRequest(
                    post_id=str(post.id), caller_id=str(author_id), state=state
                )
            )

    @pytest.mark.asyncio
    async def test_non_author(self, unit_env):
        """Non-authors can't publish."""
        # Arrange
        use_case = await unit_env.get(UpdatePostStateUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.insert(make_post(UserId(uuid4()), state=PostState.DRAFT))

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await use_case.execute(
                UpdatePostStateRequest(
                    post_id=str(post.id), caller_id=str(uuid4()), state="published"
                )
            )
