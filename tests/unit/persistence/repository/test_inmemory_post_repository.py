"""Unit tests for the in-memory post repository."""

from uuid import uuid4

import pytest

from quill.domain.value import (
    PostCriteria,
    PostId,
    PostSortField,
    PostState,
    SortDirection,
    UserId,
)
from quill.persistence.repository.inmemory.post import InMemoryPostRepository
from tests.conftest import make_post


class TestInMemoryPostRepository:
    """Unit tests for InMemoryPostRepository."""

    @pytest.mark.asyncio
    async def test_replace_missing_post_returns_none(self):
        # Arrange
        repo = InMemoryPostRepository()
        post = make_post(UserId(uuid4()))

        # Act
        result = await repo.replace(post)

        # Assert
        assert result is None
        assert await repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_delete_reports_whether_anything_was_removed(self):
        # Arrange
        repo = InMemoryPostRepository()
        post = await repo.insert(make_post(UserId(uuid4())))

        # Act & Assert
        assert await repo.delete(post.id) is True
        assert await repo.delete(post.id) is False

    @pytest.mark.asyncio
    async def test_increment_skips_drafts_and_missing_posts(self):
        # Arrange
        repo = InMemoryPostRepository()
        draft = await repo.insert(make_post(UserId(uuid4()), state=PostState.DRAFT))

        # Act & Assert
        assert await repo.increment_read_count(draft.id) is None
        assert await repo.increment_read_count(PostId(uuid4())) is None
        assert (await repo.find_by_id(draft.id)).read_count == 0

    @pytest.mark.asyncio
    async def test_increment_leaves_updated_at_alone(self):
        # Arrange
        repo = InMemoryPostRepository()
        post = await repo.insert(make_post(UserId(uuid4())))

        # Act
        updated = await repo.increment_read_count(post.id)

        # Assert
        assert updated.read_count == 1
        assert updated.updated_at == post.updated_at

    @pytest.mark.asyncio
    async def test_find_many_combines_filters(self):
        # Arrange
        repo = InMemoryPostRepository()
        author_id = UserId(uuid4())
        await repo.insert(make_post(author_id, title="Python Draft", state=PostState.DRAFT))
        await repo.insert(make_post(author_id, title="Python Published"))
        await repo.insert(make_post(author_id, title="Rust Published"))
        await repo.insert(make_post(UserId(uuid4()), title="Python Elsewhere"))

        # Act
        posts, total = await repo.find_many(
            PostCriteria(
                author_id=author_id,
                state=PostState.PUBLISHED,
                title_contains="PYTHON",
            )
        )

        # Assert
        assert total == 1
        assert [post.title for post in posts] == ["Python Published"]

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self):
        # Arrange
        repo = InMemoryPostRepository()
        author_id = UserId(uuid4())
        await repo.insert(make_post(author_id, title="100% Python"))
        await repo.insert(make_post(author_id, title="1000 Pythons"))

        # Act
        posts, _ = await repo.find_many(PostCriteria(title_contains="100%"))

        # Assert
        assert [post.title for post in posts] == ["100% Python"]

    @pytest.mark.asyncio
    async def test_ties_are_broken_by_id(self):
        # Arrange
        repo = InMemoryPostRepository()
        author_id = UserId(uuid4())
        posts = [await repo.insert(make_post(author_id, read_count=7)) for _ in range(5)]

        # Act
        page_one, _ = await repo.find_many(
            PostCriteria(), PostSortField.READ_COUNT, SortDirection.ASC, 0, 3
        )
        page_two, _ = await repo.find_many(
            PostCriteria(), PostSortField.READ_COUNT, SortDirection.ASC, 3, 3
        )

        # Assert
        ordered = sorted(posts, key=lambda p: str(p.id))
        assert [p.id for p in page_one + page_two] == [p.id for p in ordered]
