"""Domain model entities for Quill."""

from quill.domain.model.post import Post
from quill.domain.model.user import User

__all__ = [
    "Post",
    "User",
]
