"""Get post use cases."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import PostService, ReplyService
from forum.domain.value import PostId

from .items import PostItem, ReplyItem, ThreadItem


class GetPostResponse(BaseModel):
    """A post with its replies, both flat and threaded."""

    post: PostItem
    replies: list[ReplyItem]
    thread: ThreadItem


class GetPostUseCase:
    """Use case for reading a whole thread."""

    def __init__(self, post_service: PostService, reply_service: ReplyService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            reply_service: Reply domain service
        """
        self.post_service = post_service
        self.reply_service = reply_service

    async def execute(self, post_id: str) -> GetPostResponse:
        """Fetch a post, its replies, and the assembled reply thread.

        Raises:
            ValueError: If post_id is not a UUID
            NotFoundError: If post not found
        """
        post = await self.post_service.require_post(PostId(UUID(post_id)))
        replies, thread = await self.reply_service.get_thread(post.id)
        return GetPostResponse(
            post=PostItem.from_domain(post),
            replies=[ReplyItem.from_domain(r) for r in replies],
            thread=ThreadItem.from_domain(thread),
        )


class GetPostDetailsUseCase:
    """Use case for reading a post without its replies."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, post_id: str) -> PostItem:
        """Fetch a post.

        Raises:
            ValueError: If post_id is not a UUID
            NotFoundError: If post not found
        """
        post = await self.post_service.require_post(PostId(UUID(post_id)))
        return PostItem.from_domain(post)
