"""Create post use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.service import PostService

from .common import PostResponse, parse_user_id


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str
    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None
    body: Optional[str] = None


class CreatePostResponse(PostResponse):
    """Create post response."""

    pass


class CreatePostUseCase(BaseUseCase[CreatePostRequest, CreatePostResponse]):
    """Use case for creating a draft post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post lifecycle service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Post fields and the authenticated author

        Returns:
            The created post

        Raises:
            ValidationError: If title or body is missing or empty
        """
        with logfire.span("create_post.execute", author_id=request.author_id):
            post = await self.post_service.create_post(
                author_id=parse_user_id(request.author_id),
                title=request.title,
                body=request.body,
                description=request.description,
                tags=request.tags,
            )
            return CreatePostResponse.from_domain(post)
