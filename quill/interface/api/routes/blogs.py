"""Blog routes.

Public reads (listing and single post) accept anonymous callers. Every
write, and the author's own listing, requires a Bearer token.
"""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel

from quill.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListMyPostsRequest,
    ListMyPostsResponse,
    ListMyPostsUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostStateRequest,
    UpdatePostStateResponse,
    UpdatePostStateUseCase,
    UpdatePostUseCase,
)
from quill.domain.service import JWTService
from quill.interface.api.caller import require_caller
from quill.interface.api.envelope import MessageResponse, SuccessResponse

router = APIRouter(prefix="/api", tags=["blogs"], route_class=DishkaRoute)


class CreateBlogAPIRequest(BaseModel):
    """API request for creating a blog post."""

    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None
    body: Optional[str] = None


class UpdateBlogAPIRequest(BaseModel):
    """API request for editing a blog post. Omitted fields are unchanged."""

    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None
    body: Optional[str] = None


class UpdateBlogStateAPIRequest(BaseModel):
    """API request for publishing or unpublishing a blog post."""

    state: Optional[str] = None


@router.post(
    "/blogs",
    response_model=SuccessResponse[CreatePostResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_blog(
    request: CreateBlogAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: Optional[str] = Header(default=None),
) -> SuccessResponse[CreatePostResponse]:
    """Create a draft blog post owned by the caller."""
    caller_id = require_caller(authorization, jwt_service)

    result = await create_post_use_case.execute(
        CreatePostRequest(author_id=str(caller_id), **request.model_dump())
    )
    return SuccessResponse[CreatePostResponse](data=result)


@router.get("/blogs", response_model=SuccessResponse[ListPostsResponse])
async def list_blogs(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    search: Optional[str] = Query(default=None),
    order_by: Optional[str] = Query(default=None, alias="orderBy"),
    order: Optional[str] = Query(default=None),
    page: Optional[str] = Query(default=None),
    limit: Optional[str] = Query(default=None),
) -> SuccessResponse[ListPostsResponse]:
    """List published blog posts.

    Query Parameters:
        search: Case-insensitive title substring
        orderBy: created_at, read_count, title or reading_time
        order: asc or desc
        page: 1-based page number
        limit: Page size (capped)
    """
    result = await list_posts_use_case.execute(
        ListPostsRequest(
            search=search, order_by=order_by, order=order, page=page, limit=limit
        )
    )
    return SuccessResponse[ListPostsResponse](data=result)


@router.get("/blogs/{blog_id}", response_model=SuccessResponse[GetPostResponse])
async def get_blog(
    blog_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> SuccessResponse[GetPostResponse]:
    """Read a published blog post. Each read increments its read count."""
    result = await get_post_use_case.execute(GetPostRequest(post_id=blog_id))
    return SuccessResponse[GetPostResponse](data=result)


@router.put("/blogs/{blog_id}", response_model=SuccessResponse[UpdatePostResponse])
async def update_blog(
    blog_id: str,
    request: UpdateBlogAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: Optional[str] = Header(default=None),
) -> SuccessResponse[UpdatePostResponse]:
    """Edit a blog post's content. Only the author may do this."""
    caller_id = require_caller(authorization, jwt_service)

    result = await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=blog_id, caller_id=str(caller_id), **request.model_dump()
        )
    )
    return SuccessResponse[UpdatePostResponse](data=result)


@router.patch(
    "/blogs/{blog_id}/state", response_model=SuccessResponse[UpdatePostStateResponse]
)
async def update_blog_state(
    blog_id: str,
    request: UpdateBlogStateAPIRequest,
    update_post_state_use_case: FromDishka[UpdatePostStateUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: Optional[str] = Header(default=None),
) -> SuccessResponse[UpdatePostStateResponse]:
    """Publish or unpublish a blog post. Only the author may do this."""
    caller_id = require_caller(authorization, jwt_service)

    result = await update_post_state_use_case.execute(
        UpdatePostStateRequest(
            post_id=blog_id, caller_id=str(caller_id), state=request.state
        )
    )
    return SuccessResponse[UpdatePostStateResponse](data=result)


@router.delete("/blogs/{blog_id}", response_model=MessageResponse)
async def delete_blog(
    blog_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: Optional[str] = Header(default=None),
) -> MessageResponse:
    """Permanently delete a blog post. Only the author may do this."""
    caller_id = require_caller(authorization, jwt_service)

    result = await delete_post_use_case.execute(
        DeletePostRequest(post_id=blog_id, caller_id=str(caller_id))
    )
    return MessageResponse(message=result.message)


@router.get("/my-blogs", response_model=SuccessResponse[ListMyPostsResponse])
async def list_my_blogs(
    list_my_posts_use_case: FromDishka[ListMyPostsUseCase],
    jwt_service: FromDishka[JWTService],
    state: Optional[str] = Query(default=None),
    page: Optional[str] = Query(default=None),
    limit: Optional[str] = Query(default=None),
    authorization: Optional[str] = Header(default=None),
) -> SuccessResponse[ListMyPostsResponse]:
    """List the caller's own blog posts, drafts included, newest first."""
    caller_id = require_caller(authorization, jwt_service)

    result = await list_my_posts_use_case.execute(
        ListMyPostsRequest(
            author_id=str(caller_id), state=state, page=page, limit=limit
        )
    )
    return SuccessResponse[ListMyPostsResponse](data=result)
