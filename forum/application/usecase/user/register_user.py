"""Register user use case."""

from pydantic import BaseModel, Field

from forum.domain.service import UserService
from forum.domain.value import UserId, Username

from .items import UserItem


class RegisterUserRequest(BaseModel):
    """Register user request."""

    user_id: str = Field(min_length=1, max_length=128)  # Identity provider subject
    email: str = Field(min_length=1, max_length=255)
    username: str | None = None  # Generated when omitted


class RegisterUserUseCase:
    """Use case for creating a user on first authentication."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: RegisterUserRequest) -> UserItem:
        """Register a user, or return the existing one for this id.

        Raises:
            ValueError: If the requested username is malformed
            ValidationError: If the requested username is taken
        """
        username = Username(request.username) if request.username else None
        user = await self.user_service.register(
            user_id=UserId(request.user_id),
            email=request.email,
            username=username,
        )
        return UserItem.from_domain(user)
