"""Vote entity.

Each user holds at most one vote per post or reply. Changing direction
updates the existing vote rather than adding another.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import UserId, VotableType, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per item (enforced by database unique constraint)
    - Polymorphic reference to exactly one votable (post or reply)
    """

    id: VoteId
    user_id: UserId
    votable_type: VotableType
    votable_id: UUID  # PostId or ReplyId (both are UUIDs)
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)
