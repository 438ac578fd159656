"""Shared post request/response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from quill.domain.error import NotFoundError
from quill.domain.model import Post, User
from quill.domain.value import PageInfo, PostId, UserId


def parse_post_id(raw: str) -> PostId:
    """Parse a post ID from a path segment.

    A malformed ID can never name a stored post, so it is reported as
    missing rather than as a validation failure.
    """
    try:
        return PostId(UUID(str(raw)))
    except ValueError:
        raise NotFoundError("Post", str(raw))


def parse_user_id(raw: str) -> UserId:
    return UserId(UUID(str(raw)))


class AuthorSummary(BaseModel):
    """Public view of a post's author."""

    id: str
    first_name: str
    last_name: str

    @classmethod
    def from_domain(cls, user: User) -> "AuthorSummary":
        return cls(
            id=str(user.id), first_name=user.first_name, last_name=user.last_name
        )


class PostResponse(BaseModel):
    """A post as returned to clients."""

    id: str
    title: str
    description: Optional[str]
    tags: list[str]
    body: str
    author_id: str
    state: str
    read_count: int
    reading_time: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostResponse":
        return cls(
            id=str(post.id),
            title=post.title,
            description=post.description,
            tags=list(post.tags),
            body=post.body,
            author_id=str(post.author_id),
            state=post.state.value,
            read_count=post.read_count,
            reading_time=post.reading_time,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class PaginationResponse(BaseModel):
    """Pagination metadata for a listing."""

    total: int
    page: int
    limit: int
    pages: int

    @classmethod
    def from_domain(cls, page_info: PageInfo) -> "PaginationResponse":
        return cls(
            total=page_info.total,
            page=page_info.page,
            limit=page_info.limit,
            pages=page_info.pages,
        )


class PostListResponse(BaseModel):
    """A page of posts."""

    blogs: list[PostResponse]
    pagination: PaginationResponse
