"""In-memory post repository for testing."""

from typing import Optional

from forum.domain.model.post import Post
from forum.domain.repository.post import PostRepository
from forum.domain.value import Category, PostId, ReplyId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(
        self,
        category: Optional[Category] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts newest first, with filtering and pagination."""
        posts = list(self._posts.values())
        if category is not None:
            posts = [p for p in posts if p.category == category]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def count(self, category: Optional[Category] = None) -> int:
        """Count posts, optionally within one category."""
        if category is None:
            return len(self._posts)
        return sum(1 for p in self._posts.values() if p.category == category)

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None

    async def adjust_votes(
        self, post_id: PostId, upvotes_delta: int, downvotes_delta: int
    ) -> Optional[Post]:
        """Shift both vote tallies (minimum 0)."""
        post = self._posts.get(post_id)
        if not post:
            return None
        updated = post.model_copy(
            update={
                "upvotes": max(post.upvotes + upvotes_delta, 0),
                "downvotes": max(post.downvotes + downvotes_delta, 0),
            }
        )
        self._posts[post_id] = updated
        return updated

    async def adjust_reply_count(self, post_id: PostId, delta: int) -> None:
        """Shift the reply count (minimum 0)."""
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(
                update={"reply_count": max(post.reply_count + delta, 0)}
            )

    async def set_solution(
        self, post_id: PostId, reply_id: Optional[ReplyId]
    ) -> Optional[Post]:
        """Set or clear the accepted solution of a post."""
        post = self._posts.get(post_id)
        if not post:
            return None
        updated = post.model_copy(update={"solution_id": reply_id})
        self._posts[post_id] = updated
        return updated
