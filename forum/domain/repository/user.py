"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.user import User
from forum.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The identity provider subject id

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: The username to look up

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def update_username(
        self, user_id: UserId, username: Username
    ) -> Optional[User]:
        """Change a user's username.

        Args:
            user_id: The user's ID
            username: New username

        Returns:
            Updated user, or None if the user doesn't exist
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count registered users."""
        pass
