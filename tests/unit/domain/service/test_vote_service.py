"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from forum.domain.error import NotFoundError
from forum.domain.repository import (
    PostRepository,
    ReplyRepository,
    UserRepository,
    VoteRepository,
)
from forum.domain.service import VoteService
from forum.domain.value import VotableType, VoteType
from tests.conftest import make_post, make_reply, make_user
from tests.harness import create_env_fixture

# Unit test fixture - in-memory persistence
unit_env = create_env_fixture()


async def _seed(unit_env):
    user_repo = await unit_env.get(UserRepository)
    post_repo = await unit_env.get(PostRepository)
    voter = await user_repo.save(make_user("voter-1", "QuietJadeHeron"))
    post = await post_repo.save(make_post(author_id="author-1"))
    return voter, post


class TestCastVoteOnPost:
    """Tests for cast_vote on posts."""

    @pytest.mark.asyncio
    async def test_first_vote_creates_vote_and_increments_tally(self, unit_env):
        """A first upvote is stored and bumps upvotes by one."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post_repo = await unit_env.get(PostRepository)
        voter, post = await _seed(unit_env)

        # Act
        vote = await vote_service.cast_vote(
            voter.id, VotableType.POST, post.id, VoteType.UPVOTE
        )

        # Assert
        stored = await vote_repo.find_by_user_and_votable(
            voter.id, VotableType.POST, post.id
        )
        assert stored == vote
        updated = await post_repo.find_by_id(post.id)
        assert (updated.upvotes, updated.downvotes) == (1, 0)

    @pytest.mark.asyncio
    async def test_same_vote_twice_is_a_no_op(self, unit_env):
        """Repeating the same vote leaves tallies and vote count unchanged."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post_repo = await unit_env.get(PostRepository)
        voter, post = await _seed(unit_env)
        first = await vote_service.cast_vote(
            voter.id, VotableType.POST, post.id, VoteType.DOWNVOTE
        )

        # Act
        second = await vote_service.cast_vote(
            voter.id, VotableType.POST, post.id, VoteType.DOWNVOTE
        )

        # Assert
        assert second.id == first.id
        updated = await post_repo.find_by_id(post.id)
        assert (updated.upvotes, updated.downvotes) == (0, 1)
        assert await vote_repo.count_by_votable(VotableType.POST, post.id) == 1

    @pytest.mark.asyncio
    async def test_switching_vote_moves_one_unit(self, unit_env):
        """Switching from upvote to downvote moves one unit between tallies."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        voter, post = await _seed(unit_env)
        first = await vote_service.cast_vote(
            voter.id, VotableType.POST, post.id, VoteType.UPVOTE
        )

        # Act
        switched = await vote_service.cast_vote(
            voter.id, VotableType.POST, post.id, VoteType.DOWNVOTE
        )

        # Assert
        assert switched.id == first.id
        assert switched.vote_type == VoteType.DOWNVOTE
        updated = await post_repo.find_by_id(post.id)
        assert (updated.upvotes, updated.downvotes) == (0, 1)

    @pytest.mark.asyncio
    async def test_switch_never_drops_tally_below_zero(self, unit_env):
        """A stale tally of zero stays at zero when a vote moves away."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        voter, post = await _seed(unit_env)
        await vote_service.cast_vote(
            voter.id, VotableType.POST, post.id, VoteType.UPVOTE
        )
        await post_repo.save(
            (await post_repo.find_by_id(post.id)).model_copy(update={"upvotes": 0})
        )

        # Act
        await vote_service.cast_vote(
            voter.id, VotableType.POST, post.id, VoteType.DOWNVOTE
        )

        # Assert
        updated = await post_repo.find_by_id(post.id)
        assert (updated.upvotes, updated.downvotes) == (0, 1)

    @pytest.mark.asyncio
    async def test_vote_on_missing_post_raises(self, unit_env):
        """Voting on a post that doesn't exist raises NotFoundError."""
        vote_service = await unit_env.get(VoteService)
        voter, _ = await _seed(unit_env)

        with pytest.raises(NotFoundError, match="Post not found"):
            await vote_service.cast_vote(
                voter.id, VotableType.POST, uuid4(), VoteType.UPVOTE
            )

    @pytest.mark.asyncio
    async def test_vote_by_unknown_user_raises(self, unit_env):
        """Voting as a user that doesn't exist raises NotFoundError."""
        vote_service = await unit_env.get(VoteService)
        _, post = await _seed(unit_env)

        with pytest.raises(NotFoundError, match="User not found"):
            await vote_service.cast_vote(
                "ghost", VotableType.POST, post.id, VoteType.UPVOTE
            )


class TestCastVoteOnReply:
    """Tests for cast_vote on replies."""

    @pytest.mark.asyncio
    async def test_reply_vote_updates_reply_tally_only(self, unit_env):
        """A vote on a reply changes the reply's tallies, not the post's."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        voter, post = await _seed(unit_env)
        reply = await reply_repo.save(make_reply(post.id, author_id="author-1"))

        # Act
        await vote_service.cast_vote(
            voter.id, VotableType.REPLY, reply.id, VoteType.DOWNVOTE
        )

        # Assert
        updated_reply = await reply_repo.find_by_id(reply.id)
        assert (updated_reply.upvotes, updated_reply.downvotes) == (0, 1)
        updated_post = await post_repo.find_by_id(post.id)
        assert (updated_post.upvotes, updated_post.downvotes) == (0, 0)

    @pytest.mark.asyncio
    async def test_vote_on_missing_reply_raises(self, unit_env):
        """Voting on a reply that doesn't exist raises NotFoundError."""
        vote_service = await unit_env.get(VoteService)
        voter, _ = await _seed(unit_env)

        with pytest.raises(NotFoundError, match="Reply not found"):
            await vote_service.cast_vote(
                voter.id, VotableType.REPLY, uuid4(), VoteType.UPVOTE
            )


class TestGetVote:
    """Tests for get_vote."""

    @pytest.mark.asyncio
    async def test_no_vote_returns_none(self, unit_env):
        """A user who hasn't voted gets None, not an error."""
        vote_service = await unit_env.get(VoteService)
        voter, post = await _seed(unit_env)

        assert await vote_service.get_vote(voter.id, VotableType.POST, post.id) is None

    @pytest.mark.asyncio
    async def test_returns_current_vote(self, unit_env):
        """The stored vote reflects the latest vote type."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        voter, post = await _seed(unit_env)
        await vote_service.cast_vote(
            voter.id, VotableType.POST, post.id, VoteType.UPVOTE
        )
        await vote_service.cast_vote(
            voter.id, VotableType.POST, post.id, VoteType.DOWNVOTE
        )

        # Act
        vote = await vote_service.get_vote(voter.id, VotableType.POST, post.id)

        # Assert
        assert vote.vote_type == VoteType.DOWNVOTE


class TestDeleteVotesFor:
    """Tests for delete_votes_for."""

    @pytest.mark.asyncio
    async def test_deletes_only_votes_on_given_items(self, unit_env):
        """Votes on other items survive."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post_repo = await unit_env.get(PostRepository)
        voter, post = await _seed(unit_env)
        other = await post_repo.save(make_post(author_id="author-1"))
        await vote_service.cast_vote(
            voter.id, VotableType.POST, post.id, VoteType.UPVOTE
        )
        await vote_service.cast_vote(
            voter.id, VotableType.POST, other.id, VoteType.UPVOTE
        )

        # Act
        deleted = await vote_service.delete_votes_for(VotableType.POST, [post.id])

        # Assert
        assert deleted == 1
        assert await vote_repo.count_by_votable(VotableType.POST, post.id) == 0
        assert await vote_repo.count_by_votable(VotableType.POST, other.id) == 1

    @pytest.mark.asyncio
    async def test_empty_id_list_deletes_nothing(self, unit_env):
        """No ids means no work."""
        vote_service = await unit_env.get(VoteService)

        assert await vote_service.delete_votes_for(VotableType.REPLY, []) == 0
