"""Shared auth response models."""

from pydantic import BaseModel

from quill.domain.model import User


class UserSummary(BaseModel):
    """A user as returned to clients. Never carries the password hash."""

    id: str
    first_name: str
    last_name: str
    email: str

    @classmethod
    def from_domain(cls, user: User) -> "UserSummary":
        return cls(
            id=str(user.id),
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email.root,
        )


class AuthResponse(BaseModel):
    """An authenticated user and their access token."""

    user: UserSummary
    token: str
