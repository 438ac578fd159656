"""Domain value objects for Quill.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and the small bits of business logic
that belong to a single value (state transitions, paging arithmetic).
"""

import math
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from quill.domain.error import ValidationError
from quill.domain.value.common import RootValueObject, ValueObject
from quill.domain.value.identifiers import UserId


class PostState(str, Enum):
    """Lifecycle state of a post."""

    DRAFT = "draft"
    PUBLISHED = "published"

    @classmethod
    def parse(cls, value: "str | PostState") -> "PostState":
        """Parse a raw state value. Only the exact lower-case names are accepted."""
        if isinstance(value, PostState):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(state.value for state in cls)
            raise ValidationError(f"State must be one of: {allowed}")

    def transition_to(self, target: "str | PostState") -> "PostState":
        """Return the state reached by moving from this state to ``target``.

        Draft and published toggle freely in both directions; moving to the
        current state is a no-op.

        Raises:
            ValidationError: If ``target`` is not a known state or the move
                is not allowed
        """
        target_state = PostState.parse(target)
        if target_state not in _ALLOWED_TRANSITIONS[self]:
            raise ValidationError(
                f"Cannot move post from {self.value} to {target_state.value}"
            )
        return target_state

    @property
    def is_public(self) -> bool:
        """Whether posts in this state are visible to non-authors."""
        return self is PostState.PUBLISHED


_ALLOWED_TRANSITIONS: dict[PostState, frozenset[PostState]] = {
    PostState.DRAFT: frozenset({PostState.DRAFT, PostState.PUBLISHED}),
    PostState.PUBLISHED: frozenset({PostState.PUBLISHED, PostState.DRAFT}),
}


class SortDirection(str, Enum):
    """Sort direction for listings."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortDirection":
        """Parse a direction, falling back to descending."""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.DESC


class PostSortField(str, Enum):
    """Fields a post listing can be ordered by."""

    CREATED_AT = "created_at"
    READ_COUNT = "read_count"
    TITLE = "title"
    READING_TIME = "reading_time"

    @classmethod
    def parse(cls, value: Optional[str]) -> "PostSortField":
        """Parse a sort field, falling back to ``created_at``."""
        try:
            return cls(str(value).strip())
        except ValueError:
            return cls.CREATED_AT


class Email(RootValueObject[str]):
    """Email address, normalised to lower case."""

    @field_validator("root")
    @classmethod
    def normalise_email(cls, v: str) -> str:
        """Lower-case and validate basic shape."""
        v = v.strip().lower()
        local, _, domain = v.partition("@")
        if not local or not domain:
            raise ValueError("Email must be a valid address")
        if len(v) > 255:
            raise ValueError("Email must be at most 255 characters")
        return v


def _coerce_positive_int(value: object) -> int | None:
    try:
        number = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return number if number >= 1 else None


class PageRequest(ValueObject):
    """A normalised page/limit pair.

    Use ``from_raw`` to build one from untrusted input: invalid values are
    clamped to defaults instead of raising.
    """

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1)

    @classmethod
    def from_raw(
        cls,
        page: object = None,
        limit: object = None,
        default_limit: int = 20,
        max_limit: int = 100,
    ) -> "PageRequest":
        """Clamp raw page/limit values.

        - page: missing, non-numeric or < 1 becomes 1
        - limit: missing, non-numeric or < 1 becomes ``default_limit``;
          values above ``max_limit`` are capped
        """
        clean_page = _coerce_positive_int(page) or 1
        clean_limit = _coerce_positive_int(limit) or default_limit
        return cls(page=clean_page, limit=min(clean_limit, max_limit))

    @property
    def offset(self) -> int:
        """Number of items to skip."""
        return (self.page - 1) * self.limit


class PageInfo(ValueObject):
    """Pagination metadata returned alongside a page of results."""

    total: int = Field(ge=0)
    page: int = Field(ge=1)
    limit: int = Field(ge=1)
    pages: int = Field(ge=0)

    @classmethod
    def build(cls, total: int, request: PageRequest) -> "PageInfo":
        """Compute metadata for ``total`` matching items."""
        return cls(
            total=total,
            page=request.page,
            limit=request.limit,
            pages=math.ceil(total / request.limit),
        )


class PostCriteria(ValueObject):
    """Filter for post scans. ``None`` fields are not applied."""

    state: Optional[PostState] = None
    author_id: Optional[UserId] = None
    title_contains: Optional[str] = None

    @field_validator("title_contains")
    @classmethod
    def blank_search_is_no_search(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty or whitespace-only term as no filter."""
        if v is None or not v.strip():
            return None
        return v
