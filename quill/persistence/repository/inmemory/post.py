"""In-memory post repository for testing."""

from typing import Any, Optional

from quill.domain.model.post import Post
from quill.domain.repository.post import PostRepository
from quill.domain.value import (
    PostCriteria,
    PostId,
    PostSortField,
    PostState,
    SortDirection,
)


def _matches(post: Post, criteria: PostCriteria) -> bool:
    if criteria.state is not None and post.state != criteria.state:
        return False
    if criteria.author_id is not None and post.author_id != criteria.author_id:
        return False
    if (
        criteria.title_contains is not None
        and criteria.title_contains.lower() not in post.title.lower()
    ):
        return False
    return True


def _sort_key(sort: PostSortField):
    def key(post: Post) -> tuple[Any, str]:
        if sort == PostSortField.TITLE:
            value: Any = post.title.lower()
        else:
            value = getattr(post, sort.value)
        return (value, str(post.id))

    return key


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    No method awaits between reading and writing ``_posts``, so each call is
    atomic with respect to other coroutines on the same event loop.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def insert(self, post: Post) -> Post:
        """Insert a new post."""
        if post.id in self._posts:
            raise ValueError(f"Post already exists: {post.id}")
        self._posts[post.id] = post
        return post

    async def replace(self, post: Post) -> Optional[Post]:
        """Replace an existing post."""
        if post.id not in self._posts:
            return None
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None

    async def increment_read_count(self, post_id: PostId) -> Optional[Post]:
        """Increment read_count on a published post."""
        post = self._posts.get(post_id)
        if post is None or post.state != PostState.PUBLISHED:
            return None
        # Reads don't touch updated_at
        updated = post.model_copy(update={"read_count": post.read_count + 1})
        self._posts[post_id] = updated
        return updated

    async def find_many(
        self,
        criteria: PostCriteria,
        sort: PostSortField = PostSortField.CREATED_AT,
        direction: SortDirection = SortDirection.DESC,
        offset: int = 0,
        limit: int = 20,
    ) -> tuple[list[Post], int]:
        """Filter, sort and paginate posts."""
        posts = [p for p in self._posts.values() if _matches(p, criteria)]
        posts.sort(key=_sort_key(sort), reverse=direction == SortDirection.DESC)
        return posts[offset : offset + limit], len(posts)
