"""Post domain service."""

from uuid import uuid4

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model import Post
from forum.domain.repository import PostRepository
from forum.domain.value import Category, PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(
        self, title: str, content: str, category: Category, author_id: UserId
    ) -> Post:
        """Create a new post.

        Args:
            title: Post title
            content: Post body
            category: Post category
            author_id: Author user ID

        Returns:
            Created post
        """
        with logfire.span(
            "post_service.create_post",
            author_id=str(author_id),
            category=category.value,
        ):
            post = Post(
                id=PostId(uuid4()),
                title=title,
                content=content,
                category=category,
                author_id=author_id,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), title=saved.title)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def require_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", str(post_id))
        return post

    async def list_posts(
        self, category: Category | None = None, limit: int = 30, offset: int = 0
    ) -> list[Post]:
        """List posts newest first.

        Args:
            category: Optional category filter
            limit: Page size
            offset: Number of posts to skip

        Returns:
            Page of posts
        """
        with logfire.span(
            "post_service.list_posts",
            category=category.value if category else None,
            limit=limit,
            offset=offset,
        ):
            posts = await self.post_repository.find_all(
                category=category, limit=limit, offset=offset
            )
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def count_posts(self, category: Category | None = None) -> int:
        """Count posts, optionally in one category."""
        with logfire.span("post_service.count_posts"):
            return await self.post_repository.count(category)

    async def delete_post(self, post_id: PostId) -> bool:
        """Delete a post row. Replies and votes are removed by the caller."""
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            deleted = await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id), deleted=deleted)
            return deleted

    async def adjust_reply_count(self, post_id: PostId, delta: int) -> None:
        """Atomically shift a post's reply count (minimum 0).

        Args:
            post_id: Post ID
            delta: Amount to add (negative to subtract)
        """
        with logfire.span(
            "post_service.adjust_reply_count", post_id=str(post_id), delta=delta
        ):
            await self.post_repository.adjust_reply_count(post_id, delta)
