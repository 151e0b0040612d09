"""Update username use case."""

from pydantic import BaseModel

from forum.domain.service import UserService
from forum.domain.value import UserId, Username

from .items import UserItem


class UpdateUsernameRequest(BaseModel):
    """Update username request."""

    user_id: str
    username: str


class UpdateUsernameUseCase:
    """Use case for changing a user's username."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update username use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUsernameRequest) -> UserItem:
        """Change the username.

        Raises:
            ValueError: If the username is not 3-30 characters
            ValidationError: If another user holds the username
            NotFoundError: If user not found
        """
        user = await self.user_service.change_username(
            UserId(request.user_id), Username(request.username)
        )
        return UserItem.from_domain(user)
