"""In-memory vote repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from forum.domain.model.vote import Vote
from forum.domain.repository.vote import VoteRepository
from forum.domain.value import UserId, VotableType, VoteId, VoteType


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a vote by user and votable item."""
        for vote in self._votes:
            if (
                vote.user_id == user_id
                and vote.votable_type == votable_type
                and vote.votable_id == votable_id
            ):
                return vote
        return None

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        existing = await self.find_by_user_and_votable(
            vote.user_id, vote.votable_type, vote.votable_id
        )
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> Optional[Vote]:
        """Change the direction of an existing vote."""
        for i, vote in enumerate(self._votes):
            if vote.id == vote_id:
                updated = vote.model_copy(update={"vote_type": vote_type})
                self._votes[i] = updated
                return updated
        return None

    async def delete_by_votables(
        self,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> int:
        """Delete every vote on the given items."""
        targets = set(votable_ids)
        kept = [
            v
            for v in self._votes
            if not (v.votable_type == votable_type and v.votable_id in targets)
        ]
        deleted = len(self._votes) - len(kept)
        self._votes = kept
        return deleted

    async def count_by_votable(self, votable_type: VotableType, votable_id: UUID) -> int:
        """Count votes for a votable item."""
        return sum(
            1
            for v in self._votes
            if v.votable_type == votable_type and v.votable_id == votable_id
        )
