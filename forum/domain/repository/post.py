"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.post import Post
from forum.domain.value import Category, PostId, ReplyId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        category: Optional[Category] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts newest first, with filtering and pagination.

        Args:
            category: Filter by category (None for all categories)
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, category: Optional[Category] = None) -> int:
        """Count posts, optionally within one category."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def adjust_votes(
        self, post_id: PostId, upvotes_delta: int, downvotes_delta: int
    ) -> Optional[Post]:
        """Shift the vote tallies of a post in a single update.

        Uses a SQL-level relative update so concurrent votes are not lost.
        Tallies are clamped at zero.

        Args:
            post_id: The post ID
            upvotes_delta: Change applied to ``upvotes``
            downvotes_delta: Change applied to ``downvotes``

        Returns:
            Updated post, or None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def adjust_reply_count(self, post_id: PostId, delta: int) -> None:
        """Shift the denormalized reply count (minimum 0).

        Args:
            post_id: The post ID
            delta: Change applied to ``reply_count``
        """
        pass

    @abstractmethod
    async def set_solution(
        self, post_id: PostId, reply_id: Optional[ReplyId]
    ) -> Optional[Post]:
        """Set or clear the accepted solution of a post.

        Args:
            post_id: The post ID
            reply_id: Solution reply ID, or None to clear

        Returns:
            Updated post, or None if the post doesn't exist
        """
        pass
