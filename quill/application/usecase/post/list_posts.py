"""List published posts use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.service import PostQueryService

from .common import PaginationResponse, PostListResponse, PostResponse


class ListPostsRequest(BaseModel):
    """List posts request.

    Values arrive as raw query strings; the query service clamps or falls
    back on anything it doesn't understand.
    """

    search: Optional[str] = None
    order_by: Optional[str] = None
    order: Optional[str] = None
    page: Optional[str] = None
    limit: Optional[str] = None


class ListPostsResponse(PostListResponse):
    """List posts response."""

    pass


class ListPostsUseCase(BaseUseCase[ListPostsRequest, ListPostsResponse]):
    """Use case for the public listing of published posts."""

    def __init__(self, post_query_service: PostQueryService) -> None:
        """Initialize list posts use case.

        Args:
            post_query_service: Post query service
        """
        self.post_query_service = post_query_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow."""
        with logfire.span("list_posts.execute", search=request.search):
            result = await self.post_query_service.list_published(
                search=request.search,
                order_by=request.order_by,
                order=request.order,
                page=request.page,
                limit=request.limit,
            )
            return ListPostsResponse(
                blogs=[PostResponse.from_domain(post) for post in result.posts],
                pagination=PaginationResponse.from_domain(result.page_info),
            )
