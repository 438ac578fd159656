"""User aggregate root.

Users sign up with an email and password and become the authors of the
posts they create. Users are never modified or deleted by the blog engine.
"""

from datetime import datetime

from pydantic import Field

from quill.domain.model.common import DomainModel, utc_now
from quill.domain.value import Email, UserId


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: Email
    password_hash: str = Field(repr=False)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
