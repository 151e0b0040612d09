"""Reply repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.reply import Reply
from forum.domain.value import PostId, ReplyId


class ReplyRepository(ABC):
    """Repository for Reply entity.

    Defines the contract for reply persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID.

        Args:
            reply_id: The reply's unique identifier

        Returns:
            The reply if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Reply]:
        """Find all replies of a post, oldest first.

        Args:
            post_id: The post ID

        Returns:
            Flat list of replies in chronological order
        """
        pass

    @abstractmethod
    async def save(self, reply: Reply) -> Reply:
        """Save a reply (create or update).

        Args:
            reply: The reply to save

        Returns:
            The saved reply
        """
        pass

    @abstractmethod
    async def delete(self, reply_id: ReplyId) -> bool:
        """Delete a reply (hard delete).

        Child replies are left in place.

        Args:
            reply_id: The reply ID to delete

        Returns:
            True if a reply was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every reply of a post.

        Args:
            post_id: The post ID

        Returns:
            Number of replies deleted
        """
        pass

    @abstractmethod
    async def adjust_votes(
        self, reply_id: ReplyId, upvotes_delta: int, downvotes_delta: int
    ) -> Optional[Reply]:
        """Shift the vote tallies of a reply in a single update.

        Tallies are clamped at zero.

        Args:
            reply_id: The reply ID
            upvotes_delta: Change applied to ``upvotes``
            downvotes_delta: Change applied to ``downvotes``

        Returns:
            Updated reply, or None if the reply doesn't exist
        """
        pass

    @abstractmethod
    async def set_solution_flag(
        self, reply_id: ReplyId, is_solution: bool
    ) -> Optional[Reply]:
        """Set or clear the solution flag on a reply.

        Args:
            reply_id: The reply ID
            is_solution: New flag value

        Returns:
            Updated reply, or None if the reply doesn't exist
        """
        pass
