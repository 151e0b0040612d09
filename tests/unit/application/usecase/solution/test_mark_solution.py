"""Unit tests for MarkSolutionUseCase and RemoveSolutionUseCase."""

import pytest

from forum.application.usecase.solution import (
    MarkSolutionRequest,
    MarkSolutionUseCase,
    RemoveSolutionRequest,
    RemoveSolutionUseCase,
)
from forum.domain.error import NotAuthorizedError
from forum.domain.repository import PostRepository, ReplyRepository
from forum.domain.service import PostService, SolutionService
from tests.conftest import make_post, make_reply
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestMarkSolutionUseCase:
    """Tests for MarkSolutionUseCase."""

    @pytest.mark.asyncio
    async def test_author_marks_solution(self, unit_env):
        """The post author can accept a reply."""
        # Arrange
        use_case = MarkSolutionUseCase(
            post_service=await unit_env.get(PostService),
            solution_service=await unit_env.get(SolutionService),
        )
        post_repo = await unit_env.get(PostRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        post = await post_repo.save(make_post(author_id="alice"))
        reply = await reply_repo.save(make_reply(post.id, author_id="bob"))

        # Act
        response = await use_case.execute(
            MarkSolutionRequest(
                post_id=str(post.id), reply_id=str(reply.id), user_id="alice"
            )
        )

        # Assert
        assert response.solution_id == str(reply.id)
        assert (await reply_repo.find_by_id(reply.id)).is_solution is True

    @pytest.mark.asyncio
    async def test_non_author_cannot_mark(self, unit_env):
        """Only the post author may accept a reply."""
        # Arrange
        use_case = MarkSolutionUseCase(
            post_service=await unit_env.get(PostService),
            solution_service=await unit_env.get(SolutionService),
        )
        post_repo = await unit_env.get(PostRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        post = await post_repo.save(make_post(author_id="alice"))
        reply = await reply_repo.save(make_reply(post.id, author_id="bob"))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                MarkSolutionRequest(
                    post_id=str(post.id), reply_id=str(reply.id), user_id="bob"
                )
            )
        assert (await post_repo.find_by_id(post.id)).solution_id is None


class TestRemoveSolutionUseCase:
    """Tests for RemoveSolutionUseCase."""

    @pytest.mark.asyncio
    async def test_author_removes_solution(self, unit_env):
        """Removing the solution clears the post and the reply."""
        # Arrange
        solution_service = await unit_env.get(SolutionService)
        use_case = RemoveSolutionUseCase(
            post_service=await unit_env.get(PostService),
            solution_service=solution_service,
        )
        post_repo = await unit_env.get(PostRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        post = await post_repo.save(make_post(author_id="alice"))
        reply = await reply_repo.save(make_reply(post.id, author_id="bob"))
        await solution_service.mark_solution(post, reply.id)

        # Act
        response = await use_case.execute(
            RemoveSolutionRequest(post_id=str(post.id), user_id="alice")
        )

        # Assert
        assert response.solution_id is None
        assert (await reply_repo.find_by_id(reply.id)).is_solution is False

    @pytest.mark.asyncio
    async def test_non_author_cannot_remove(self, unit_env):
        """Only the post author may clear the solution."""
        use_case = RemoveSolutionUseCase(
            post_service=await unit_env.get(PostService),
            solution_service=await unit_env.get(SolutionService),
        )
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(author_id="alice"))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                RemoveSolutionRequest(post_id=str(post.id), user_id="bob")
            )
