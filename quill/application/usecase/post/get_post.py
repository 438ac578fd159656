"""Get post use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.service import PostQueryService

from .common import AuthorSummary, PostResponse, parse_post_id


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostResponse(PostResponse):
    """A published post with its author expanded."""

    author: Optional[AuthorSummary]


class GetPostUseCase(BaseUseCase[GetPostRequest, GetPostResponse]):
    """Use case for reading a single published post."""

    def __init__(self, post_query_service: PostQueryService) -> None:
        """Initialize get post use case.

        Args:
            post_query_service: Post query service
        """
        self.post_query_service = post_query_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Every successful call counts as one read.

        Raises:
            NotFoundError: If the ID is malformed, or the post doesn't exist
                or isn't published
        """
        with logfire.span("get_post.execute", post_id=request.post_id):
            result = await self.post_query_service.get_published(
                parse_post_id(request.post_id)
            )
            author = AuthorSummary.from_domain(result.author) if result.author else None
            return GetPostResponse(
                **PostResponse.from_domain(result.post).model_dump(),
                author=author,
            )
