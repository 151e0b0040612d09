"""Get vote use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import VoteService
from forum.domain.value import UserId, VotableType

from .items import VoteItem


class GetVoteRequest(BaseModel):
    """Get vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    user_id: str


class GetVoteUseCase:
    """Use case for reading a user's vote on an item."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetVoteRequest) -> Optional[VoteItem]:
        """Return the user's vote, or None if they haven't voted."""
        vote = await self.vote_service.get_vote(
            UserId(request.user_id),
            request.votable_type,
            UUID(request.votable_id),
        )
        return VoteItem.from_domain(vote) if vote else None
