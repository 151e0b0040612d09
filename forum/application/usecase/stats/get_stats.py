"""Forum statistics use case."""

from pydantic import BaseModel

from forum.domain.service import PostService, UserService


class StatsResponse(BaseModel):
    """Forum totals."""

    total_users: int
    total_threads: int


class GetStatsUseCase:
    """Use case for counting users and threads."""

    def __init__(self, user_service: UserService, post_service: PostService) -> None:
        self.user_service = user_service
        self.post_service = post_service

    async def execute(self) -> StatsResponse:
        return StatsResponse(
            total_users=await self.user_service.count_users(),
            total_threads=await self.post_service.count_posts(),
        )
