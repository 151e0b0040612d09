"""Reply domain service."""

from uuid import uuid4

import logfire

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model import Reply
from forum.domain.repository import ReplyRepository
from forum.domain.value import PostId, ReplyId, UserId

from .base import Service
from .thread import ReplyThread, assemble_thread


class ReplyService(Service):
    """Domain service for reply operations."""

    def __init__(self, reply_repository: ReplyRepository) -> None:
        """Initialize reply service.

        Args:
            reply_repository: Reply repository
        """
        self.reply_repository = reply_repository

    async def get_parent(self, post_id: PostId, parent_reply_id: ReplyId) -> Reply:
        """Look up the reply being answered and check it belongs to the post.

        Raises:
            NotFoundError: If the parent reply doesn't exist
            ValidationError: If the parent reply is on another post
        """
        parent = await self.reply_repository.find_by_id(parent_reply_id)
        if not parent:
            logfire.warn(
                "Parent reply not found",
                parent_reply_id=str(parent_reply_id),
                post_id=str(post_id),
            )
            raise NotFoundError("Reply", str(parent_reply_id))
        if parent.post_id != post_id:
            logfire.warn(
                "Parent reply does not belong to post",
                parent_reply_id=str(parent_reply_id),
                parent_post_id=str(parent.post_id),
                target_post_id=str(post_id),
            )
            raise ValidationError("Parent reply does not belong to this post")
        return parent

    async def create_reply(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_reply_id: ReplyId | None = None,
    ) -> Reply:
        """Create a reply on a post, optionally answering another reply.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Final reply content (quote already applied)
            parent_reply_id: Reply being answered (None for a direct reply)

        Returns:
            Created reply

        Raises:
            NotFoundError: If the parent reply doesn't exist
            ValidationError: If the parent reply is on another post
        """
        with logfire.span(
            "reply_service.create_reply",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_reply_id=str(parent_reply_id) if parent_reply_id else None,
        ):
            if parent_reply_id:
                await self.get_parent(post_id, parent_reply_id)

            reply = Reply(
                id=ReplyId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                content=content,
                parent_reply_id=parent_reply_id,
            )
            saved = await self.reply_repository.save(reply)
            logfire.info(
                "Reply created", reply_id=str(saved.id), post_id=str(post_id)
            )
            return saved

    async def get_reply_by_id(self, reply_id: ReplyId) -> Reply | None:
        """Get a reply by ID.

        Args:
            reply_id: Reply ID

        Returns:
            Reply if found, None otherwise
        """
        with logfire.span("reply_service.get_reply_by_id", reply_id=str(reply_id)):
            reply = await self.reply_repository.find_by_id(reply_id)
            if reply:
                logfire.info("Reply found", reply_id=str(reply_id))
            else:
                logfire.warn("Reply not found", reply_id=str(reply_id))
            return reply

    async def get_replies_for_post(self, post_id: PostId) -> list[Reply]:
        """Get all replies of a post, oldest first."""
        with logfire.span(
            "reply_service.get_replies_for_post", post_id=str(post_id)
        ):
            replies = await self.reply_repository.find_by_post(post_id)
            logfire.info(
                "Replies retrieved for post", post_id=str(post_id), count=len(replies)
            )
            return replies

    async def get_thread(self, post_id: PostId) -> tuple[list[Reply], ReplyThread]:
        """Get a post's replies both flat and folded into a thread.

        Returns:
            Tuple of (flat replies oldest first, assembled thread)
        """
        replies = await self.get_replies_for_post(post_id)
        return replies, assemble_thread(replies)

    async def delete_reply(self, reply_id: ReplyId) -> bool:
        """Delete a single reply. Its children are kept."""
        with logfire.span("reply_service.delete_reply", reply_id=str(reply_id)):
            deleted = await self.reply_repository.delete(reply_id)
            logfire.info("Reply deleted", reply_id=str(reply_id), deleted=deleted)
            return deleted

    async def delete_replies_for_post(self, post_id: PostId) -> int:
        """Delete every reply of a post.

        Returns:
            Number of replies deleted
        """
        with logfire.span(
            "reply_service.delete_replies_for_post", post_id=str(post_id)
        ):
            count = await self.reply_repository.delete_by_post(post_id)
            logfire.info("Replies deleted for post", post_id=str(post_id), count=count)
            return count
