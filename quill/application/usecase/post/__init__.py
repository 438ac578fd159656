"""Post use cases."""

from .common import AuthorSummary, PaginationResponse, PostListResponse, PostResponse
from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .list_my_posts import ListMyPostsRequest, ListMyPostsResponse, ListMyPostsUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .update_post import UpdatePostRequest, UpdatePostResponse, UpdatePostUseCase
from .update_post_state import (
    UpdatePostStateRequest,
    UpdatePostStateResponse,
    UpdatePostStateUseCase,
)

__all__ = [
    "AuthorSummary",
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "ListMyPostsRequest",
    "ListMyPostsResponse",
    "ListMyPostsUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PaginationResponse",
    "PostListResponse",
    "PostResponse",
    "UpdatePostRequest",
    "UpdatePostResponse",
    "UpdatePostStateRequest",
    "UpdatePostStateResponse",
    "UpdatePostStateUseCase",
    "UpdatePostUseCase",
]
