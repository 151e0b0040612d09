"""Mark solution use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.error import NotAuthorizedError
from forum.domain.service import PostService, SolutionService
from forum.domain.value import PostId, ReplyId


class MarkSolutionRequest(BaseModel):
    """Mark solution request."""

    post_id: str
    reply_id: str
    user_id: str  # Caller; must be the post author


class SolutionResponse(BaseModel):
    """Solution state of a post after the change."""

    post_id: str
    solution_id: str | None


class MarkSolutionUseCase:
    """Use case for accepting a reply as the solution of a post."""

    def __init__(
        self, post_service: PostService, solution_service: SolutionService
    ) -> None:
        """Initialize mark solution use case.

        Args:
            post_service: Post domain service
            solution_service: Solution domain service
        """
        self.post_service = post_service
        self.solution_service = solution_service

    async def execute(self, request: MarkSolutionRequest) -> SolutionResponse:
        """Execute mark solution flow.

        Raises:
            ValueError: If an id is not a UUID
            NotFoundError: If the post or reply doesn't exist
            NotAuthorizedError: If the caller is not the post author
            ValidationError: If the reply belongs to another post
        """
        post = await self.post_service.require_post(PostId(UUID(request.post_id)))
        if post.author_id != request.user_id:
            raise NotAuthorizedError(
                "mark a solution on", "post", str(post.id), request.user_id
            )

        reply = await self.solution_service.mark_solution(
            post, ReplyId(UUID(request.reply_id))
        )
        return SolutionResponse(post_id=str(post.id), solution_id=str(reply.id))
