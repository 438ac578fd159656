"""Update post content use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.service import PostService

from .common import PostResponse, parse_post_id, parse_user_id


class UpdatePostRequest(BaseModel):
    """Update post request. Fields left as None are not changed."""

    post_id: str
    caller_id: str
    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None
    body: Optional[str] = None


class UpdatePostResponse(PostResponse):
    """Update post response."""

    pass


class UpdatePostUseCase(BaseUseCase[UpdatePostRequest, UpdatePostResponse]):
    """Use case for editing a post's content."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post lifecycle service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            ForbiddenError: If the caller is not the author
            ValidationError: If a supplied title or body is empty
        """
        with logfire.span(
            "update_post.execute", post_id=request.post_id, caller_id=request.caller_id
        ):
            post = await self.post_service.update_content(
                parse_post_id(request.post_id),
                parse_user_id(request.caller_id),
                title=request.title,
                description=request.description,
                tags=request.tags,
                body=request.body,
            )
            return UpdatePostResponse.from_domain(post)
