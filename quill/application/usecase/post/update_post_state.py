"""Update post state use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.error import ValidationError
from quill.domain.service import PostService

from .common import PostResponse, parse_post_id, parse_user_id


class UpdatePostStateRequest(BaseModel):
    """Update post state request."""

    post_id: str
    caller_id: str
    state: Optional[str] = None


class UpdatePostStateResponse(PostResponse):
    """Update post state response."""

    pass


class UpdatePostStateUseCase(
    BaseUseCase[UpdatePostStateRequest, UpdatePostStateResponse]
):
    """Use case for publishing and unpublishing a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post state use case.

        Args:
            post_service: Post lifecycle service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostStateRequest) -> UpdatePostStateResponse:
        """Execute update post state flow.

        Raises:
            ValidationError: If the state is missing or unknown
            NotFoundError: If the post doesn't exist
            ForbiddenError: If the caller is not the author
        """
        if not request.state:
            raise ValidationError("State is required")

        with logfire.span(
            "update_post_state.execute",
            post_id=request.post_id,
            caller_id=request.caller_id,
            state=request.state,
        ):
            post = await self.post_service.update_state(
                parse_post_id(request.post_id),
                parse_user_id(request.caller_id),
                request.state,
            )
            return UpdatePostStateResponse.from_domain(post)
