"""Domain value objects for Quill."""

from quill.domain.value.identifiers import PostId, UserId
from quill.domain.value.types import (
    Email,
    PageInfo,
    PageRequest,
    PostCriteria,
    PostSortField,
    PostState,
    SortDirection,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    # Types
    "Email",
    "PageInfo",
    "PageRequest",
    "PostCriteria",
    "PostSortField",
    "PostState",
    "SortDirection",
]
