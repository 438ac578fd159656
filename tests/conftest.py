"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4

import logfire

from quill.domain.model import Post, User
from quill.domain.rules import compute_reading_time
from quill.domain.value import Email, PostId, PostState, UserId

# Keep spans local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


def make_user(
    email: str = "john@example.com",
    first_name: str = "John",
    last_name: str = "Doe",
    user_id: Optional[UserId] = None,
) -> User:
    """Helper to build a User with a placeholder password hash."""
    return User(
        id=user_id or UserId(uuid4()),
        first_name=first_name,
        last_name=last_name,
        email=Email(email),
        password_hash="not-a-real-hash",
        created_at=BASE_TIME,
        updated_at=BASE_TIME,
    )


def make_post(
    author_id: UserId,
    title: str = "Test Post",
    body: str = "Some body text",
    state: PostState = PostState.PUBLISHED,
    read_count: int = 0,
    minutes_after_base: int = 0,
    tags: Optional[list[str]] = None,
) -> Post:
    """Helper to build a Post directly, bypassing the lifecycle service.

    ``minutes_after_base`` spaces out created_at so ordering is predictable.
    """
    created_at = BASE_TIME + timedelta(minutes=minutes_after_base)
    return Post(
        id=PostId(uuid4()),
        title=title,
        description=None,
        tags=tags or [],
        body=body,
        author_id=author_id,
        state=state,
        read_count=read_count,
        reading_time=compute_reading_time(body),
        created_at=created_at,
        updated_at=created_at,
    )
