"""Post query domain service.

The read side of the blog: public listings, single-post retrieval and the
author's own listing. Visibility is enforced here; drafts are reported as
missing to anyone reading through the public paths.
"""

from dataclasses import dataclass
from typing import Optional

import logfire

from quill.config import ListingSettings
from quill.domain.error import NotFoundError, UnauthorizedError
from quill.domain.model import Post, User
from quill.domain.repository import PostRepository, UserRepository
from quill.domain.value import (
    PageInfo,
    PageRequest,
    PostCriteria,
    PostId,
    PostSortField,
    PostState,
    SortDirection,
    UserId,
)


@dataclass
class PostPage:
    """One page of posts plus its pagination metadata."""

    posts: list[Post]
    page_info: PageInfo


@dataclass
class PublishedPost:
    """A published post together with its author.

    ``author`` is None only if the author record has gone missing.
    """

    post: Post
    author: Optional[User]


class PostQueryService:
    """Domain service for reading posts."""

    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        listing_settings: ListingSettings | None = None,
    ) -> None:
        """Initialize post query service.

        Args:
            post_repository: Post repository
            user_repository: User repository (for author expansion)
            listing_settings: Default and maximum page sizes
        """
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.listing_settings = listing_settings or ListingSettings()

    def page_request(self, page: object = None, limit: object = None) -> PageRequest:
        """Clamp raw pagination input using the configured bounds."""
        return PageRequest.from_raw(
            page,
            limit,
            default_limit=self.listing_settings.default_limit,
            max_limit=self.listing_settings.max_limit,
        )

    async def _find_page(
        self,
        criteria: PostCriteria,
        sort: PostSortField,
        direction: SortDirection,
        page_request: PageRequest,
    ) -> PostPage:
        posts, total = await self.post_repository.find_many(
            criteria,
            sort=sort,
            direction=direction,
            offset=page_request.offset,
            limit=page_request.limit,
        )
        return PostPage(posts=posts, page_info=PageInfo.build(total, page_request))

    async def list_published(
        self,
        search: Optional[str] = None,
        order_by: Optional[str] = None,
        order: Optional[str] = None,
        page: object = None,
        limit: object = None,
    ) -> PostPage:
        """List published posts.

        Unknown sort fields or directions and invalid paging values fall back
        to defaults rather than raising.

        Args:
            search: Case-insensitive substring to look for in titles
            order_by: created_at, read_count, title or reading_time
            order: asc or desc
            page: 1-based page number
            limit: Page size

        Returns:
            The requested page and pagination metadata
        """
        criteria = PostCriteria(state=PostState.PUBLISHED, title_contains=search)
        sort = PostSortField.parse(order_by)
        direction = SortDirection.parse(order)
        page_request = self.page_request(page, limit)

        with logfire.span(
            "post_query_service.list_published",
            search=criteria.title_contains,
            sort=sort.value,
            direction=direction.value,
            page=page_request.page,
            limit=page_request.limit,
        ):
            result = await self._find_page(criteria, sort, direction, page_request)
            logfire.info(
                "Published posts listed",
                count=len(result.posts),
                total=result.page_info.total,
            )
            return result

    async def get_published(self, post_id: PostId) -> PublishedPost:
        """Read a published post, counting the read.

        Missing and unpublished posts are indistinguishable: both raise
        NotFoundError.

        Args:
            post_id: Post ID

        Returns:
            The post as it is after the read count increment, and its author

        Raises:
            NotFoundError: If the post doesn't exist or isn't published
        """
        with logfire.span("post_query_service.get_published", post_id=str(post_id)):
            post = await self.post_repository.increment_read_count(post_id)
            if post is None:
                logfire.warn("Published post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            author = await self.user_repository.find_by_id(post.author_id)
            if author is None:
                logfire.warn(
                    "Author missing for post",
                    post_id=str(post_id),
                    author_id=str(post.author_id),
                )

            logfire.info("Post read", post_id=str(post_id), read_count=post.read_count)
            return PublishedPost(post=post, author=author)

    async def list_by_author(
        self,
        caller_id: Optional[UserId],
        state: Optional[str] = None,
        page: object = None,
        limit: object = None,
    ) -> PostPage:
        """List the caller's own posts in any state, newest first.

        Args:
            caller_id: Authenticated caller (None if anonymous)
            state: Optional state filter (draft or published)
            page: 1-based page number
            limit: Page size

        Returns:
            The requested page and pagination metadata

        Raises:
            UnauthorizedError: If there is no caller
            ValidationError: If ``state`` is not a known state
        """
        if caller_id is None:
            raise UnauthorizedError()

        state_filter = PostState.parse(state) if state else None
        page_request = self.page_request(page, limit)

        with logfire.span(
            "post_query_service.list_by_author",
            author_id=str(caller_id),
            state=state_filter.value if state_filter else None,
            page=page_request.page,
            limit=page_request.limit,
        ):
            result = await self._find_page(
                PostCriteria(author_id=caller_id, state=state_filter),
                PostSortField.CREATED_AT,
                SortDirection.DESC,
                page_request,
            )
            logfire.info(
                "Author posts listed",
                author_id=str(caller_id),
                count=len(result.posts),
                total=result.page_info.total,
            )
            return result
