"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from quill.domain.model import Post, User
from quill.domain.value import Email, PostId, PostState, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "email": user.email.root,
        "password_hash": user.password_hash,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description"),
        tags=list(row.get("tags") or []),
        body=row["body"],
        author_id=UserId(_uuid(row["author_id"])),
        state=PostState(row["state"]),
        read_count=row["read_count"],
        reading_time=row["reading_time"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return {
        "id": post.id,
        "title": post.title,
        "description": post.description,
        "tags": list(post.tags),
        "body": post.body,
        "author_id": post.author_id,
        "state": post.state.value,
        "read_count": post.read_count,
        "reading_time": post.reading_time,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }
