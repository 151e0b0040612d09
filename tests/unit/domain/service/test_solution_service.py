"""Unit tests for SolutionService."""

from uuid import uuid4

import pytest

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.repository import PostRepository, ReplyRepository
from forum.domain.service import SolutionService
from forum.domain.value import ReplyId
from tests.conftest import make_post, make_reply
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestMarkSolution:
    """Tests for mark_solution."""

    @pytest.mark.asyncio
    async def test_marks_reply_and_post(self, unit_env):
        """Marking sets the reply flag and the post's solution id."""
        # Arrange
        solution_service = await unit_env.get(SolutionService)
        post_repo = await unit_env.get(PostRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        post = await post_repo.save(make_post())
        reply = await reply_repo.save(make_reply(post.id))

        # Act
        marked = await solution_service.mark_solution(post, reply.id)

        # Assert
        assert marked.is_solution is True
        assert (await post_repo.find_by_id(post.id)).solution_id == reply.id
        assert (await reply_repo.find_by_id(reply.id)).is_solution is True

    @pytest.mark.asyncio
    async def test_new_solution_clears_previous(self, unit_env):
        """Only one reply of a post is flagged as the solution."""
        # Arrange
        solution_service = await unit_env.get(SolutionService)
        post_repo = await unit_env.get(PostRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        post = await post_repo.save(make_post())
        first = await reply_repo.save(make_reply(post.id, minutes=1))
        second = await reply_repo.save(make_reply(post.id, minutes=2))
        await solution_service.mark_solution(post, first.id)
        post = await post_repo.find_by_id(post.id)

        # Act
        await solution_service.mark_solution(post, second.id)

        # Assert
        replies = await reply_repo.find_by_post(post.id)
        assert [r.id for r in replies if r.is_solution] == [second.id]
        assert (await post_repo.find_by_id(post.id)).solution_id == second.id

    @pytest.mark.asyncio
    async def test_remarking_same_reply_is_idempotent(self, unit_env):
        """Marking the current solution again keeps it marked."""
        # Arrange
        solution_service = await unit_env.get(SolutionService)
        post_repo = await unit_env.get(PostRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        post = await post_repo.save(make_post())
        reply = await reply_repo.save(make_reply(post.id))
        await solution_service.mark_solution(post, reply.id)
        post = await post_repo.find_by_id(post.id)

        # Act
        marked = await solution_service.mark_solution(post, reply.id)

        # Assert
        assert marked.is_solution is True
        assert (await post_repo.find_by_id(post.id)).solution_id == reply.id

    @pytest.mark.asyncio
    async def test_missing_reply_raises(self, unit_env):
        """Marking a reply that doesn't exist raises NotFoundError."""
        solution_service = await unit_env.get(SolutionService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        with pytest.raises(NotFoundError):
            await solution_service.mark_solution(post, ReplyId(uuid4()))

    @pytest.mark.asyncio
    async def test_reply_of_other_post_raises(self, unit_env):
        """A reply from another post cannot be its solution."""
        # Arrange
        solution_service = await unit_env.get(SolutionService)
        post_repo = await unit_env.get(PostRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        post = await post_repo.save(make_post())
        other_post = await post_repo.save(make_post())
        foreign_reply = await reply_repo.save(make_reply(other_post.id))

        # Act & Assert
        with pytest.raises(ValidationError):
            await solution_service.mark_solution(post, foreign_reply.id)


class TestRemoveSolution:
    """Tests for remove_solution and clear_if_solution."""

    @pytest.mark.asyncio
    async def test_remove_clears_flag_and_post(self, unit_env):
        """Removing the solution clears both sides."""
        # Arrange
        solution_service = await unit_env.get(SolutionService)
        post_repo = await unit_env.get(PostRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        post = await post_repo.save(make_post())
        reply = await reply_repo.save(make_reply(post.id))
        await solution_service.mark_solution(post, reply.id)

        # Act
        await solution_service.remove_solution(await post_repo.find_by_id(post.id))

        # Assert
        assert (await post_repo.find_by_id(post.id)).solution_id is None
        assert (await reply_repo.find_by_id(reply.id)).is_solution is False

    @pytest.mark.asyncio
    async def test_clear_if_solution_ignores_other_replies(self, unit_env):
        """Only the reply that is the solution clears it."""
        # Arrange
        solution_service = await unit_env.get(SolutionService)
        post_repo = await unit_env.get(PostRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        post = await post_repo.save(make_post())
        solution = await reply_repo.save(make_reply(post.id, minutes=1))
        other = await reply_repo.save(make_reply(post.id, minutes=2))
        await solution_service.mark_solution(post, solution.id)

        # Act
        await solution_service.clear_if_solution(post.id, other.id)

        # Assert
        assert (await post_repo.find_by_id(post.id)).solution_id == solution.id
