"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from uuid import UUID

from forum.domain.model.vote import Vote
from forum.domain.value import UserId, VotableType, VoteId, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            user_id: The user's ID
            votable_type: Type of item (post or reply)
            votable_id: ID of the item

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the user already voted on this item
        """
        pass

    @abstractmethod
    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> Optional[Vote]:
        """Change the direction of an existing vote.

        Args:
            vote_id: The vote ID
            vote_type: New vote type

        Returns:
            Updated vote, or None if the vote doesn't exist
        """
        pass

    @abstractmethod
    async def delete_by_votables(
        self,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> int:
        """Delete every vote on the given items.

        Args:
            votable_type: Type of items (post or reply)
            votable_ids: IDs of the items

        Returns:
            Number of votes deleted
        """
        pass

    @abstractmethod
    async def count_by_votable(self, votable_type: VotableType, votable_id: UUID) -> int:
        """Count votes on a specific item."""
        pass
