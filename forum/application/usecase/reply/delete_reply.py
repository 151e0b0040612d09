"""Delete reply use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.service import (
    PostService,
    ReplyService,
    SolutionService,
    VoteService,
)
from forum.domain.value import ReplyId, VotableType


class DeleteReplyRequest(BaseModel):
    """Delete reply request."""

    reply_id: str
    user_id: str  # Caller; must be the author


class DeleteReplyResponse(BaseModel):
    """Delete reply response."""

    reply_id: str
    post_id: str
    was_solution: bool


class DeleteReplyUseCase:
    """Use case for deleting a single reply.

    Replies nested under the deleted one are kept and show up as top-level
    replies afterwards.
    """

    def __init__(
        self,
        reply_service: ReplyService,
        post_service: PostService,
        vote_service: VoteService,
        solution_service: SolutionService,
    ) -> None:
        self.reply_service = reply_service
        self.post_service = post_service
        self.vote_service = vote_service
        self.solution_service = solution_service

    async def execute(self, request: DeleteReplyRequest) -> DeleteReplyResponse:
        """Execute delete reply flow.

        Steps:
        1. Verify the reply exists and the caller is its author
        2. Clear the post's solution if it points at this reply
        3. Delete the reply's votes and the reply
        4. Decrement the post's reply count

        Raises:
            ValueError: If reply_id is not a UUID
            NotFoundError: If reply not found
            NotAuthorizedError: If the caller is not the author
        """
        reply_id = ReplyId(UUID(request.reply_id))
        reply = await self.reply_service.get_reply_by_id(reply_id)
        if not reply:
            raise NotFoundError("Reply", request.reply_id)
        if reply.author_id != request.user_id:
            raise NotAuthorizedError("delete", "reply", request.reply_id, request.user_id)

        await self.solution_service.clear_if_solution(reply.post_id, reply.id)
        await self.vote_service.delete_votes_for(VotableType.REPLY, [reply.id])
        await self.reply_service.delete_reply(reply.id)
        await self.post_service.adjust_reply_count(reply.post_id, -1)

        return DeleteReplyResponse(
            reply_id=str(reply.id),
            post_id=str(reply.post_id),
            was_solution=reply.is_solution,
        )
