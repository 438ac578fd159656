"""Unit tests for DeletePostUseCase."""

from uuid import uuid4

import pytest

from quill.application.usecase.post import DeletePostRequest, DeletePostUseCase
from quill.domain.error import ForbiddenError, NotFoundError
from quill.domain.repository import PostRepository
from quill.domain.value import UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeletePostUseCase:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_delete_post(self, unit_env):
        """The author deletes their post."""
        # Arrange
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        author_id = UserId(uuid4())
        post = await post_repo.insert(make_post(author_id))

        # Act
        response = await use_case.execute(
            DeletePostRequest(post_id=str(post.id), caller_id=str(author_id))
        )

        # Assert
        assert response.message == "Blog deleted successfully"
        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_delete_post_not_author(self, unit_env):
        """Someone else's post can't be deleted."""
        # Arrange
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.insert(make_post(UserId(uuid4())))

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await use_case.execute(
                DeletePostRequest(post_id=str(post.id), caller_id=str(uuid4()))
            )

        assert await post_repo.find_by_id(post.id) is not None

    @pytest.mark.asyncio
    async def test_delete_missing_post(self, unit_env):
        """Unknown posts are not found."""
        # Arrange
        use_case = await unit_env.get(DeletePostUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeletePostRequest(post_id=str(uuid4()), caller_id=str(uuid4()))
            )
