"""Delete post use case."""

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.service import PostService

from .common import parse_post_id, parse_user_id


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    caller_id: str


class DeletePostResponse(BaseModel):
    """Delete post response."""

    message: str


class DeletePostUseCase(BaseUseCase[DeletePostRequest, DeletePostResponse]):
    """Use case for permanently deleting a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            ForbiddenError: If the caller is not the author
        """
        with logfire.span(
            "delete_post.execute", post_id=request.post_id, caller_id=request.caller_id
        ):
            await self.post_service.delete_post(
                parse_post_id(request.post_id), parse_user_id(request.caller_id)
            )
            return DeletePostResponse(message="Blog deleted successfully")
