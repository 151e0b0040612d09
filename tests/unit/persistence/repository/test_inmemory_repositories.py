"""Unit tests for the in-memory repositories."""

from datetime import timedelta
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from forum.domain.model import Vote
from forum.domain.value import (
    Category,
    UserId,
    VotableType,
    VoteId,
    VoteType,
)
from forum.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryReplyRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from tests.conftest import BASE_TIME, make_post, make_reply, make_user


def _vote(votable_id, user_id: str = "voter-1") -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        user_id=UserId(user_id),
        votable_type=VotableType.POST,
        votable_id=votable_id,
        vote_type=VoteType.UPVOTE,
    )


class TestInMemoryVoteRepository:
    """Unit tests for InMemoryVoteRepository."""

    @pytest.mark.asyncio
    async def test_duplicate_vote_raises_integrity_error(self):
        """One vote per user and item, like the database constraint."""
        repo = InMemoryVoteRepository()
        target = uuid4()
        await repo.save(_vote(target))

        with pytest.raises(IntegrityError):
            await repo.save(_vote(target))

    @pytest.mark.asyncio
    async def test_same_user_can_vote_on_different_items(self):
        """The uniqueness is per item."""
        repo = InMemoryVoteRepository()

        await repo.save(_vote(uuid4()))
        await repo.save(_vote(uuid4()))


class TestInMemoryUserRepository:
    """Unit tests for InMemoryUserRepository."""

    @pytest.mark.asyncio
    async def test_username_is_unique(self):
        """A second user can't take an existing username."""
        repo = InMemoryUserRepository()
        await repo.save(make_user("sub-1", "Alice"))

        with pytest.raises(IntegrityError):
            await repo.save(make_user("sub-2", "Alice"))


class TestInMemoryPostRepository:
    """Unit tests for InMemoryPostRepository."""

    @pytest.mark.asyncio
    async def test_tallies_never_go_negative(self):
        """Relative updates clamp at zero."""
        repo = InMemoryPostRepository()
        post = await repo.save(make_post())

        updated = await repo.adjust_votes(post.id, -1, -3)

        assert (updated.upvotes, updated.downvotes) == (0, 0)

    @pytest.mark.asyncio
    async def test_pagination_newest_first(self):
        """Offsets page through posts newest first."""
        # Arrange
        repo = InMemoryPostRepository()
        for minutes in range(5):
            await repo.save(
                make_post(
                    title=f"Post {minutes}",
                    category=Category.SOFTWARE,
                    created_at=BASE_TIME + timedelta(minutes=minutes),
                )
            )

        # Act
        page = await repo.find_all(category=Category.SOFTWARE, limit=2, offset=2)

        # Assert
        assert [p.title for p in page] == ["Post 2", "Post 1"]


class TestInMemoryReplyRepository:
    """Unit tests for InMemoryReplyRepository."""

    @pytest.mark.asyncio
    async def test_replies_come_oldest_first(self):
        """Replies of a post are ordered by creation time."""
        repo = InMemoryReplyRepository()
        post_id = make_post().id
        late = await repo.save(make_reply(post_id, minutes=5))
        early = await repo.save(make_reply(post_id, minutes=1))

        assert await repo.find_by_post(post_id) == [early, late]
