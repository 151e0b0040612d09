"""User domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from forum.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    ValidationError,
)
from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import UserId, Username

from .base import Service
from .username import generate_username


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self, user_repository: UserRepository, username_attempts: int = 5
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            username_attempts: How many generated names to try before giving up
        """
        self.user_repository = user_repository
        self.username_attempts = username_attempts

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User found", user_id=str(user_id), username=user.username.root)
            return user

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Get user by ID, or None if there is no such user."""
        with logfire.span("user_service.find_by_id", user_id=str(user_id)):
            return await self.user_repository.find_by_id(user_id)

    async def register(
        self, user_id: UserId, email: str, username: Username | None = None
    ) -> User:
        """Create a user on first authentication.

        Registration is idempotent: a user that already exists is returned
        unchanged, whatever username was requested.

        Args:
            user_id: Identity provider subject id
            email: User email
            username: Requested username (generated when omitted)

        Returns:
            The existing or newly created user

        Raises:
            ValidationError: If the requested username is taken
            BusinessRuleViolationError: If no free username could be generated
        """
        with logfire.span("user_service.register", user_id=str(user_id)):
            existing = await self.user_repository.find_by_id(user_id)
            if existing:
                logfire.info("User already registered", user_id=str(user_id))
                return existing

            if username is None:
                username = await self._generate_free_username()
            elif await self.user_repository.find_by_username(username):
                logfire.warn("Username taken", username=username.root)
                raise ValidationError(f"Username already taken: {username.root}")

            user = User(id=user_id, username=username, email=email)
            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                logfire.warn("Duplicate user registration", user_id=str(user_id))
                raise ValidationError("User or username already exists")

            logfire.info(
                "User registered", user_id=str(saved.id), username=saved.username.root
            )
            return saved

    async def _generate_free_username(self) -> Username:
        # Bare name first, then names with a growing numeric suffix
        for attempt in range(self.username_attempts):
            digits = attempt + 1 if attempt else 0
            candidate = Username(generate_username(suffix_digits=digits))
            if not await self.user_repository.find_by_username(candidate):
                return candidate
            logfire.info("Generated username taken", username=candidate.root)

        logfire.error(
            "Could not generate a free username", attempts=self.username_attempts
        )
        raise BusinessRuleViolationError("Could not generate a unique username")

    async def change_username(self, user_id: UserId, username: Username) -> User:
        """Change a user's username.

        Args:
            user_id: User ID
            username: New username

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
            ValidationError: If another user holds the username
        """
        with logfire.span(
            "user_service.change_username",
            user_id=str(user_id),
            username=username.root,
        ):
            if not await self.user_repository.find_by_id(user_id):
                logfire.warn("User not found for username change", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))

            holder = await self.user_repository.find_by_username(username)
            if holder and holder.id != user_id:
                logfire.warn("Username taken", username=username.root)
                raise ValidationError(f"Username already taken: {username.root}")

            updated = await self.user_repository.update_username(user_id, username)
            if not updated:
                logfire.warn("User not found for username change", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))

            logfire.info(
                "Username changed", user_id=str(user_id), username=username.root
            )
            return updated

    async def count_users(self) -> int:
        """Count registered users."""
        with logfire.span("user_service.count_users"):
            return await self.user_repository.count()
