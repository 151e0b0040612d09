"""Delete post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from forum.domain.error import NotAuthorizedError
from forum.domain.service import PostService, ReplyService, VoteService
from forum.domain.value import PostId, VotableType


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # Caller; must be the author


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    deleted_replies: int
    deleted_votes: int


class DeletePostUseCase:
    """Use case for deleting a post and everything hanging off it."""

    def __init__(
        self,
        post_service: PostService,
        reply_service: ReplyService,
        vote_service: VoteService,
    ) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            reply_service: Reply domain service
            vote_service: Vote domain service
        """
        self.post_service = post_service
        self.reply_service = reply_service
        self.vote_service = vote_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Steps:
        1. Verify the post exists and the caller is its author
        2. Delete votes on the post's replies, then votes on the post
        3. Delete the replies, then the post

        All steps run in the request's transaction.

        Raises:
            ValueError: If post_id is not a UUID
            NotFoundError: If post not found
            NotAuthorizedError: If the caller is not the author
        """
        post = await self.post_service.require_post(PostId(UUID(request.post_id)))
        if post.author_id != request.user_id:
            raise NotAuthorizedError("delete", "post", str(post.id), request.user_id)

        with logfire.span("delete_post", post_id=str(post.id)):
            replies = await self.reply_service.get_replies_for_post(post.id)
            deleted_votes = await self.vote_service.delete_votes_for(
                VotableType.REPLY, [r.id for r in replies]
            )
            deleted_votes += await self.vote_service.delete_votes_for(
                VotableType.POST, [post.id]
            )
            deleted_replies = await self.reply_service.delete_replies_for_post(post.id)
            await self.post_service.delete_post(post.id)

        return DeletePostResponse(
            post_id=str(post.id),
            deleted_replies=deleted_replies,
            deleted_votes=deleted_votes,
        )
