"""Post aggregate root.

A post is written by exactly one author and moves between ``draft`` and
``published``. Only published posts are visible to other readers.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from quill.domain.model.common import DomainModel, utc_now
from quill.domain.value import PostId, PostState, UserId


MAX_TAG_LENGTH = 100


class Post(DomainModel):
    """Post aggregate root.

    ``reading_time`` is derived from ``body`` by the lifecycle service and
    ``read_count`` is only ever bumped by public reads.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    description: Optional[str] = Field(default=None, max_length=1000)
    tags: list[str] = Field(default_factory=list)
    body: str = Field(min_length=1)
    author_id: UserId
    state: PostState = PostState.DRAFT
    read_count: int = Field(default=0, ge=0)
    reading_time: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("tags")
    @classmethod
    def normalise_tags(cls, v: list[str]) -> list[str]:
        """Strip tags, drop blanks and collapse duplicates (first one wins).

        Each tag must fit the ``tags`` column (``MAX_TAG_LENGTH`` characters).
        """
        seen: dict[str, None] = {}
        for tag in v:
            tag = tag.strip()
            if len(tag) > MAX_TAG_LENGTH:
                raise ValueError(
                    f"Tags must be at most {MAX_TAG_LENGTH} characters"
                )
            if tag:
                seen.setdefault(tag, None)
        return list(seen)
