"""Accepted solution handling."""

import logfire

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model import Post, Reply
from forum.domain.repository import PostRepository, ReplyRepository
from forum.domain.value import PostId, ReplyId

from .base import Service


class SolutionService(Service):
    """Keeps at most one accepted solution per post.

    The post's ``solution_id`` and the replies' ``is_solution`` flags are
    changed together so they always agree.
    """

    def __init__(
        self, post_repository: PostRepository, reply_repository: ReplyRepository
    ) -> None:
        self.post_repository = post_repository
        self.reply_repository = reply_repository

    async def mark_solution(self, post: Post, reply_id: ReplyId) -> Reply:
        """Mark a reply as the accepted solution of a post.

        A previously accepted reply is unmarked first. Marking the current
        solution again changes nothing.

        Args:
            post: The post
            reply_id: Reply to accept

        Returns:
            The accepted reply

        Raises:
            NotFoundError: If the reply doesn't exist
            ValidationError: If the reply belongs to another post
        """
        with logfire.span(
            "solution_service.mark_solution",
            post_id=str(post.id),
            reply_id=str(reply_id),
        ):
            reply = await self.reply_repository.find_by_id(reply_id)
            if not reply:
                logfire.warn("Solution reply not found", reply_id=str(reply_id))
                raise NotFoundError("Reply", str(reply_id))
            if reply.post_id != post.id:
                logfire.warn(
                    "Solution reply belongs to another post",
                    reply_id=str(reply_id),
                    reply_post_id=str(reply.post_id),
                    post_id=str(post.id),
                )
                raise ValidationError("Reply does not belong to this post")

            if post.solution_id == reply_id and reply.is_solution:
                return reply

            if post.solution_id and post.solution_id != reply_id:
                await self.reply_repository.set_solution_flag(post.solution_id, False)

            marked = await self.reply_repository.set_solution_flag(reply_id, True)
            await self.post_repository.set_solution(post.id, reply_id)
            logfire.info(
                "Solution marked", post_id=str(post.id), reply_id=str(reply_id)
            )
            return marked or reply.model_copy(update={"is_solution": True})

    async def remove_solution(self, post: Post) -> None:
        """Clear the accepted solution of a post, if any."""
        with logfire.span("solution_service.remove_solution", post_id=str(post.id)):
            if post.solution_id:
                await self.reply_repository.set_solution_flag(post.solution_id, False)
            await self.post_repository.set_solution(post.id, None)
            logfire.info("Solution removed", post_id=str(post.id))

    async def clear_if_solution(self, post_id: PostId, reply_id: ReplyId) -> None:
        """Clear a post's solution when it points at the given reply."""
        post = await self.post_repository.find_by_id(post_id)
        if post and post.solution_id == reply_id:
            await self.post_repository.set_solution(post_id, None)
            logfire.info(
                "Solution cleared with reply", post_id=str(post_id), reply_id=str(reply_id)
            )
