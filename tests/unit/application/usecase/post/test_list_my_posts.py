"""Unit tests for ListMyPostsUseCase."""

from uuid import uuid4

import pytest

from quill.application.usecase.post import ListMyPostsRequest, ListMyPostsUseCase
from quill.domain.error import UnauthorizedError
from quill.domain.repository import PostRepository
from quill.domain.value import PostState, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListMyPostsUseCase:
    """Tests for ListMyPostsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_drafts_and_published(self, unit_env):
        """The caller sees both of their own states."""
        # Arrange
        use_case = await unit_env.get(ListMyPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        author_id = UserId(uuid4())
        await post_repo.insert(make_post(author_id, state=PostState.DRAFT))
        await post_repo.insert(make_post(author_id, state=PostState.PUBLISHED))

        # Act
        response = await use_case.execute(ListMyPostsRequest(author_id=str(author_id)))

        # Assert
        assert {blog.state for blog in response.blogs} == {"draft", "published"}
        assert response.pagination.total == 2

    @pytest.mark.asyncio
    async def test_anonymous_caller(self, unit_env):
        """No caller, no listing."""
        # Arrange
        use_case = await unit_env.get(ListMyPostsUseCase)

        # Act & Assert
        with pytest.raises(UnauthorizedError):
            await use_case.execute(ListMyPostsRequest())
