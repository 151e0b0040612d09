"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import PostService, ReplyService, VoteService
from forum.domain.value import PostId, ReplyId, UserId, VotableType, VoteType

from .items import VoteItem


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    user_id: str
    vote_type: VoteType


class CastVoteResponse(BaseModel):
    """Cast vote response with the voted item's tallies after the vote."""

    vote: VoteItem
    upvotes: int
    downvotes: int


class CastVoteUseCase:
    """Use case for voting on a post or reply."""

    def __init__(
        self,
        vote_service: VoteService,
        post_service: PostService,
        reply_service: ReplyService,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            post_service: Post domain service
            reply_service: Reply domain service
        """
        self.vote_service = vote_service
        self.post_service = post_service
        self.reply_service = reply_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Raises:
            ValueError: If votable_id is not a UUID
            NotFoundError: If the item or the voter doesn't exist
        """
        votable_id = UUID(request.votable_id)
        vote = await self.vote_service.cast_vote(
            user_id=UserId(request.user_id),
            votable_type=request.votable_type,
            votable_id=votable_id,
            vote_type=request.vote_type,
        )

        if request.votable_type is VotableType.POST:
            target = await self.post_service.get_post_by_id(PostId(votable_id))
        else:
            target = await self.reply_service.get_reply_by_id(ReplyId(votable_id))

        return CastVoteResponse(
            vote=VoteItem.from_domain(vote),
            upvotes=target.upvotes if target else 0,
            downvotes=target.downvotes if target else 0,
        )
