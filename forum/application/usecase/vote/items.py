"""Vote response items."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model import Vote
from forum.domain.value import VotableType, VoteType


class VoteItem(BaseModel):
    """A user's vote on a post or reply."""

    vote_id: str
    user_id: str
    votable_type: VotableType
    votable_id: str
    vote_type: VoteType
    created_at: datetime

    @classmethod
    def from_domain(cls, vote: Vote) -> "VoteItem":
        return cls(
            vote_id=str(vote.id),
            user_id=vote.user_id,
            votable_type=vote.votable_type,
            votable_id=str(vote.votable_id),
            vote_type=vote.vote_type,
            created_at=vote.created_at,
        )
