"""Create reply use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from forum.config import ForumSettings
from forum.domain.service import (
    PostService,
    ReplyService,
    UserService,
    compose_quoted_reply,
)
from forum.domain.value import PostId, ReplyId, UserId

from ..post.items import ReplyItem


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    post_id: str
    author_id: str
    content: str = Field(min_length=1, max_length=10000)
    parent_reply_id: str | None = None  # Reply being answered
    quote: bool = True  # Prefix a quote of the answered reply


class CreateReplyUseCase:
    """Use case for replying to a post or to another reply."""

    def __init__(
        self,
        reply_service: ReplyService,
        post_service: PostService,
        user_service: UserService,
        forum_settings: ForumSettings,
    ) -> None:
        """Initialize create reply use case.

        Args:
            reply_service: Reply domain service
            post_service: Post domain service
            user_service: User domain service
            forum_settings: Forum settings (quote length)
        """
        self.reply_service = reply_service
        self.post_service = post_service
        self.user_service = user_service
        self.forum_settings = forum_settings

    async def execute(self, request: CreateReplyRequest) -> ReplyItem:
        """Execute create reply flow.

        Steps:
        1. Verify the post and the author exist
        2. When answering a reply, check it is on the same post and quote it
        3. Create the reply and bump the post's reply count

        Raises:
            ValueError: If an id is not a UUID
            NotFoundError: If the post, author, or parent reply doesn't exist
            ValidationError: If the parent reply is on another post
        """
        post = await self.post_service.require_post(PostId(UUID(request.post_id)))
        author = await self.user_service.get_by_id(UserId(request.author_id))

        content = request.content
        parent_reply_id = None
        if request.parent_reply_id:
            parent_reply_id = ReplyId(UUID(request.parent_reply_id))
            parent = await self.reply_service.get_parent(post.id, parent_reply_id)
            if request.quote:
                parent_author = await self.user_service.find_by_id(parent.author_id)
                content = compose_quoted_reply(
                    content=request.content,
                    quoted_content=parent.content,
                    quoted_author=parent_author.username.root if parent_author else None,
                    max_length=self.forum_settings.quote_max_length,
                )

        reply = await self.reply_service.create_reply(
            post_id=post.id,
            author_id=author.id,
            content=content,
            parent_reply_id=parent_reply_id,
        )
        await self.post_service.adjust_reply_count(post.id, 1)

        return ReplyItem.from_domain(reply)
