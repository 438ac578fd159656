"""In-memory user repository for testing."""

from typing import Optional

from quill.domain.error import ConflictError
from quill.domain.model.user import User
from quill.domain.repository.user import UserRepository
from quill.domain.value import Email, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def insert(self, user: User) -> User:
        """Insert a user, enforcing unique emails."""
        if await self.find_by_email(user.email):
            raise ConflictError("User", "email", user.email.root)
        self._users[user.id] = user
        return user
