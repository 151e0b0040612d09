"""Vote domain service."""

from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model import Vote
from forum.domain.repository import PostRepository, ReplyRepository, VoteRepository
from forum.domain.value import (
    PostId,
    ReplyId,
    UserId,
    VotableType,
    VoteId,
    VoteType,
)

from .base import Service
from .user_service import UserService


def _deltas(vote_type: VoteType, step: int) -> tuple[int, int]:
    """Map a vote type and a step (+1/-1) to (upvotes, downvotes) deltas."""
    if vote_type is VoteType.UPVOTE:
        return step, 0
    return 0, step


class VoteService(Service):
    """Domain service for vote operations.

    Each user holds at most one vote per post or reply. Tallies on the voted
    item are moved with relative updates in the same transaction as the vote.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_repository: PostRepository,
        reply_repository: ReplyRepository,
        user_service: UserService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_repository: Post repository (for tallies)
            reply_repository: Reply repository (for tallies)
            user_service: User domain service
        """
        self.vote_repository = vote_repository
        self.post_repository = post_repository
        self.reply_repository = reply_repository
        self.user_service = user_service

    async def _ensure_votable(self, votable_type: VotableType, votable_id: UUID) -> None:
        if votable_type is VotableType.POST:
            found = await self.post_repository.find_by_id(PostId(votable_id))
            resource = "Post"
        else:
            found = await self.reply_repository.find_by_id(ReplyId(votable_id))
            resource = "Reply"
        if not found:
            logfire.warn(
                "Vote on non-existent item",
                votable_type=votable_type.value,
                votable_id=str(votable_id),
            )
            raise NotFoundError(resource, str(votable_id))

    async def _adjust(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        upvotes_delta: int,
        downvotes_delta: int,
    ) -> None:
        if votable_type is VotableType.POST:
            await self.post_repository.adjust_votes(
                PostId(votable_id), upvotes_delta, downvotes_delta
            )
        else:
            await self.reply_repository.adjust_votes(
                ReplyId(votable_id), upvotes_delta, downvotes_delta
            )

    async def cast_vote(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        vote_type: VoteType,
    ) -> Vote:
        """Cast, repeat, or switch a vote.

        - No existing vote: create one and increment the matching tally
        - Same type already cast: nothing changes
        - Other type already cast: switch the vote and move one unit
          from the old tally to the new one

        Args:
            user_id: Voter ID
            votable_type: Post or reply
            votable_id: ID of the voted item
            vote_type: Upvote or downvote

        Returns:
            The user's vote after the operation

        Raises:
            NotFoundError: If the item or the voter doesn't exist
            ValidationError: If a concurrent duplicate vote was rejected
        """
        with logfire.span(
            "vote_service.cast_vote",
            user_id=str(user_id),
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            vote_type=vote_type.value,
        ):
            await self._ensure_votable(votable_type, votable_id)
            await self.user_service.get_by_id(user_id)

            existing = await self.vote_repository.find_by_user_and_votable(
                user_id, votable_type, votable_id
            )

            if existing and existing.vote_type == vote_type:
                logfire.info("Repeated vote ignored", vote_id=str(existing.id))
                return existing

            if existing:
                updated = await self.vote_repository.update_type(existing.id, vote_type)
                old_up, old_down = _deltas(existing.vote_type, -1)
                new_up, new_down = _deltas(vote_type, 1)
                await self._adjust(
                    votable_type, votable_id, old_up + new_up, old_down + new_down
                )
                logfire.info(
                    "Vote switched",
                    vote_id=str(existing.id),
                    vote_type=vote_type.value,
                )
                return updated or existing.model_copy(update={"vote_type": vote_type})

            vote = Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                votable_type=votable_type,
                votable_id=votable_id,
                vote_type=vote_type,
            )
            try:
                saved = await self.vote_repository.save(vote)
            except IntegrityError:
                logfire.warn(
                    "Duplicate vote attempt",
                    user_id=str(user_id),
                    votable_id=str(votable_id),
                )
                raise ValidationError("Already voted on this item")

            await self._adjust(votable_type, votable_id, *_deltas(vote_type, 1))
            logfire.info("Vote created", vote_id=str(saved.id))
            return saved

    async def get_vote(
        self, user_id: UserId, votable_type: VotableType, votable_id: UUID
    ) -> Vote | None:
        """Get a user's vote on an item.

        Returns:
            The vote, or None if the user hasn't voted on the item
        """
        with logfire.span(
            "vote_service.get_vote",
            user_id=str(user_id),
            votable_type=votable_type.value,
            votable_id=str(votable_id),
        ):
            return await self.vote_repository.find_by_user_and_votable(
                user_id, votable_type, votable_id
            )

    async def delete_votes_for(
        self, votable_type: VotableType, votable_ids: list[UUID]
    ) -> int:
        """Delete every vote on the given items.

        Returns:
            Number of votes deleted
        """
        with logfire.span(
            "vote_service.delete_votes_for",
            votable_type=votable_type.value,
            count=len(votable_ids),
        ):
            if not votable_ids:
                return 0
            deleted = await self.vote_repository.delete_by_votables(
                votable_type, votable_ids
            )
            logfire.info(
                "Votes deleted", votable_type=votable_type.value, deleted=deleted
            )
            return deleted
