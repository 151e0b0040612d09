"""Integration tests for the PostgreSQL repositories.

These tests need a migrated database reachable through ``DATABASE__URL``
and are skipped otherwise.
"""

import os
from uuid import uuid4

import pytest

from forum.domain.repository import PostRepository, ReplyRepository, UserRepository
from tests.conftest import make_post, make_reply, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="DATABASE__URL not set"
)

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


class TestPostgresRepositories:
    """Integration tests for the Postgres repositories."""

    @pytest.mark.asyncio
    async def test_post_tallies_clamp_at_zero(self, integration_env):
        """Relative vote updates never store a negative tally."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        suffix = uuid4().hex[:8]
        author = await user_repo.save(make_user(f"sub-{suffix}", f"Author{suffix}"))
        post = await post_repo.save(make_post(author_id=author.id))

        # Act
        up = await post_repo.adjust_votes(post.id, 1, 0)
        down = await post_repo.adjust_votes(post.id, -2, 1)

        # Assert
        assert (up.upvotes, up.downvotes) == (1, 0)
        assert (down.upvotes, down.downvotes) == (0, 1)

    @pytest.mark.asyncio
    async def test_solution_round_trip(self, integration_env):
        """Solution id and flag survive a reload."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        reply_repo = await integration_env.get(ReplyRepository)
        suffix = uuid4().hex[:8]
        author = await user_repo.save(make_user(f"sub-{suffix}", f"Author{suffix}"))
        post = await post_repo.save(make_post(author_id=author.id))
        reply = await reply_repo.save(make_reply(post.id, author_id=author.id))

        # Act
        await reply_repo.set_solution_flag(reply.id, True)
        await post_repo.set_solution(post.id, reply.id)

        # Assert
        assert (await post_repo.find_by_id(post.id)).solution_id == reply.id
        assert (await reply_repo.find_by_id(reply.id)).is_solution is True
