"""List the caller's own posts use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.service import PostQueryService

from .common import PaginationResponse, PostListResponse, PostResponse, parse_user_id


class ListMyPostsRequest(BaseModel):
    """List my posts request."""

    author_id: Optional[str] = None  # None when the caller is anonymous
    state: Optional[str] = None
    page: Optional[str] = None
    limit: Optional[str] = None


class ListMyPostsResponse(PostListResponse):
    """List my posts response."""

    pass


class ListMyPostsUseCase(BaseUseCase[ListMyPostsRequest, ListMyPostsResponse]):
    """Use case for an author's listing of their own posts, drafts included."""

    def __init__(self, post_query_service: PostQueryService) -> None:
        """Initialize list my posts use case.

        Args:
            post_query_service: Post query service
        """
        self.post_query_service = post_query_service

    async def execute(self, request: ListMyPostsRequest) -> ListMyPostsResponse:
        """Execute list my posts flow.

        Raises:
            UnauthorizedError: If there is no caller
            ValidationError: If the state filter is unknown
        """
        with logfire.span(
            "list_my_posts.execute", author_id=request.author_id, state=request.state
        ):
            caller_id = parse_user_id(request.author_id) if request.author_id else None
            result = await self.post_query_service.list_by_author(
                caller_id,
                state=request.state,
                page=request.page,
                limit=request.limit,
            )
            return ListMyPostsResponse(
                blogs=[PostResponse.from_domain(post) for post in result.posts],
                pagination=PaginationResponse.from_domain(result.page_info),
            )
