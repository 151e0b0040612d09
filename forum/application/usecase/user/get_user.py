"""Get user use case."""

from forum.domain.service import UserService
from forum.domain.value import UserId

from .items import UserItem


class GetUserUseCase:
    """Use case for fetching a user by id."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, user_id: str) -> UserItem:
        """Fetch a user.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_id(UserId(user_id))
        return UserItem.from_domain(user)
