"""Unit tests for ReplyService."""

from uuid import uuid4

import pytest

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.repository import PostRepository, ReplyRepository
from forum.domain.service import ReplyService
from forum.domain.value import ReplyId, UserId
from tests.conftest import make_post, make_reply
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateReply:
    """Tests for create_reply."""

    @pytest.mark.asyncio
    async def test_create_top_level_reply(self, unit_env):
        """A reply without a parent is stored as given."""
        # Arrange
        reply_service = await unit_env.get(ReplyService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        # Act
        reply = await reply_service.create_reply(
            post.id, UserId("user-2"), "Use a brass sponge"
        )

        # Assert
        assert reply.parent_reply_id is None
        assert reply.is_solution is False
        assert await reply_service.get_replies_for_post(post.id) == [reply]

    @pytest.mark.asyncio
    async def test_missing_parent_raises(self, unit_env):
        """Answering a reply that doesn't exist raises NotFoundError."""
        reply_service = await unit_env.get(ReplyService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        with pytest.raises(NotFoundError):
            await reply_service.create_reply(
                post.id, UserId("user-2"), "hi", parent_reply_id=ReplyId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_parent_on_other_post_raises(self, unit_env):
        """A parent reply must belong to the same post."""
        # Arrange
        reply_service = await unit_env.get(ReplyService)
        post_repo = await unit_env.get(PostRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        post = await post_repo.save(make_post())
        other_post = await post_repo.save(make_post())
        foreign = await reply_repo.save(make_reply(other_post.id))

        # Act & Assert
        with pytest.raises(ValidationError, match="does not belong"):
            await reply_service.create_reply(
                post.id, UserId("user-2"), "hi", parent_reply_id=foreign.id
            )


class TestGetThread:
    """Tests for get_thread."""

    @pytest.mark.asyncio
    async def test_thread_matches_flat_list(self, unit_env):
        """The flat list and the thread hold the same replies."""
        # Arrange
        reply_service = await unit_env.get(ReplyService)
        post_repo = await unit_env.get(PostRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        post = await post_repo.save(make_post())
        root = await reply_repo.save(make_reply(post.id, minutes=1))
        child = await reply_repo.save(
            make_reply(post.id, parent_reply_id=root.id, minutes=2)
        )

        # Act
        replies, thread = await reply_service.get_thread(post.id)

        # Assert
        assert replies == [root, child]
        assert thread.top_level == [root]
        assert thread.children[root.id] == [child]
