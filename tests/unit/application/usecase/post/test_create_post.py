"""Unit tests for CreatePostUseCase."""

from uuid import UUID, uuid4

import pytest

from quill.application.usecase.post import CreatePostRequest, CreatePostUseCase
from quill.domain.error import ValidationError
from quill.domain.repository import PostRepository
from quill.domain.value import PostId, PostState
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_create_post_returns_draft(self, unit_env):
        """A created post comes back as an unread draft owned by the caller."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        author_id = str(uuid4())

        # Act
        response = await use_case.execute(
            CreatePostRequest(
                author_id=author_id,
                title="My First Blog",
                description="Intro",
                tags=["intro"],
                body="This is the content of my first blog post",
            )
        )

        # Assert
        assert response.state == PostState.DRAFT.value
        assert response.author_id == author_id
        assert response.read_count == 0
        assert response.reading_time == 1
        assert response.description == "Intro"
        assert await post_repo.find_by_id(PostId(UUID(response.id))) is not None

    @pytest.mark.asyncio
    async def test_create_post_without_title(self, unit_env):
        """Missing title is a validation error."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreatePostRequest(author_id=str(uuid4()), body="Body only")
            )
