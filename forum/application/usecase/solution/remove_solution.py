"""Remove solution use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.error import NotAuthorizedError
from forum.domain.service import PostService, SolutionService
from forum.domain.value import PostId

from .mark_solution import SolutionResponse


class RemoveSolutionRequest(BaseModel):
    """Remove solution request."""

    post_id: str
    user_id: str  # Caller; must be the post author


class RemoveSolutionUseCase:
    """Use case for clearing the accepted solution of a post."""

    def __init__(
        self, post_service: PostService, solution_service: SolutionService
    ) -> None:
        self.post_service = post_service
        self.solution_service = solution_service

    async def execute(self, request: RemoveSolutionRequest) -> SolutionResponse:
        """Execute remove solution flow.

        Raises:
            ValueError: If post_id is not a UUID
            NotFoundError: If post not found
            NotAuthorizedError: If the caller is not the post author
        """
        post = await self.post_service.require_post(PostId(UUID(request.post_id)))
        if post.author_id != request.user_id:
            raise NotAuthorizedError(
                "remove the solution of", "post", str(post.id), request.user_id
            )

        await self.solution_service.remove_solution(post)
        return SolutionResponse(post_id=str(post.id), solution_id=None)
