"""Repository interfaces for the Quill domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from quill.domain.repository.post import PostRepository
from quill.domain.repository.user import UserRepository

__all__ = [
    "PostRepository",
    "UserRepository",
]
