"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quill.domain.model.post import Post
from quill.domain.value import PostCriteria, PostId, PostSortField, SortDirection


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def insert(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to insert

        Returns:
            The inserted post
        """
        pass

    @abstractmethod
    async def replace(self, post: Post) -> Optional[Post]:
        """Replace all mutable fields of an existing post.

        Args:
            post: The post with its new field values

        Returns:
            The stored post, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was removed
        """
        pass

    @abstractmethod
    async def increment_read_count(self, post_id: PostId) -> Optional[Post]:
        """Atomically increment read_count by 1 on a published post.

        The state check and the increment happen in one store operation,
        so concurrent readers never lose an update.

        Args:
            post_id: The post ID

        Returns:
            The post after the increment, or None if the post does not
            exist or is not published
        """
        pass

    @abstractmethod
    async def find_many(
        self,
        criteria: PostCriteria,
        sort: PostSortField = PostSortField.CREATED_AT,
        direction: SortDirection = SortDirection.DESC,
        offset: int = 0,
        limit: int = 20,
    ) -> tuple[list[Post], int]:
        """Find posts matching a filter, sorted and paginated.

        Args:
            criteria: Filter to apply
            sort: Field to order by
            direction: Sort direction
            offset: Number of posts to skip
            limit: Maximum number of posts to return

        Returns:
            The page of posts and the total number of matching posts
        """
        pass
