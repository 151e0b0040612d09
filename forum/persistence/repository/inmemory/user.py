"""In-memory user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from forum.domain.model.user import User
from forum.domain.repository.user import UserRepository
from forum.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user.

        Raises:
            IntegrityError: If another user holds the username
        """
        holder = await self.find_by_username(user.username)
        if holder and holder.id != user.id:
            raise IntegrityError("Duplicate username", None, Exception())
        self._users[user.id] = user
        return user

    async def update_username(
        self, user_id: UserId, username: Username
    ) -> Optional[User]:
        """Change a user's username."""
        user = self._users.get(user_id)
        if not user:
            return None
        updated = user.model_copy(update={"username": username})
        self._users[user_id] = updated
        return updated

    async def count(self) -> int:
        """Count registered users."""
        return len(self._users)
