"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import ForumSettings
from forum.domain.repository import (
    PostRepository,
    ReplyRepository,
    UserRepository,
    VoteRepository,
)
from forum.domain.service import (
    PostService,
    ReplyService,
    SolutionService,
    UserService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Domain services are REQUEST-scoped to share the request's repositories,
    and with them its database transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(
        self, user_repository: UserRepository, forum_settings: ForumSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            username_attempts=forum_settings.username_generation_attempts,
        )

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_reply_service(self, reply_repository: ReplyRepository) -> ReplyService:
        """Provide reply domain service."""
        return ReplyService(reply_repository=reply_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        post_repository: PostRepository,
        reply_repository: ReplyRepository,
        user_service: UserService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            post_repository=post_repository,
            reply_repository=reply_repository,
            user_service=user_service,
        )

    @provide
    def get_solution_service(
        self, post_repository: PostRepository, reply_repository: ReplyRepository
    ) -> SolutionService:
        """Provide solution domain service."""
        return SolutionService(
            post_repository=post_repository, reply_repository=reply_repository
        )
