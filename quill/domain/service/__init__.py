"""Domain services."""

from .auth_service import AuthResult, AuthService
from .jwt_service import JWTService
from .post_query_service import PostPage, PostQueryService, PublishedPost
from .post_service import PostService

__all__ = [
    "AuthResult",
    "AuthService",
    "JWTService",
    "PostPage",
    "PostQueryService",
    "PostService",
    "PublishedPost",
]
