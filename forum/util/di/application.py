"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostDetailsUseCase,
    GetPostUseCase,
    ListPostsUseCase,
)
from forum.application.usecase.reply import CreateReplyUseCase, DeleteReplyUseCase
from forum.application.usecase.solution import (
    MarkSolutionUseCase,
    RemoveSolutionUseCase,
)
from forum.application.usecase.stats import GetStatsUseCase
from forum.application.usecase.user import (
    GetUserUseCase,
    RegisterUserUseCase,
    UpdateUsernameUseCase,
)
from forum.application.usecase.vote import CastVoteUseCase, GetVoteUseCase
from forum.config import ForumSettings
from forum.domain.service import (
    PostService,
    ReplyService,
    SolutionService,
    UserService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider."""

    scope = Scope.REQUEST

    # User use cases
    @provide
    def get_register_user_use_case(
        self, user_service: UserService
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(user_service=user_service)

    @provide
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    @provide
    def get_update_username_use_case(
        self, user_service: UserService
    ) -> UpdateUsernameUseCase:
        """Provide update username use case."""
        return UpdateUsernameUseCase(user_service=user_service)

    # Post use cases
    @provide
    def get_create_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide
    def get_get_post_use_case(
        self, post_service: PostService, reply_service: ReplyService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, reply_service=reply_service)

    @provide
    def get_get_post_details_use_case(
        self, post_service: PostService
    ) -> GetPostDetailsUseCase:
        """Provide get post details use case."""
        return GetPostDetailsUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(
        self,
        post_service: PostService,
        reply_service: ReplyService,
        vote_service: VoteService,
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_service=post_service,
            reply_service=reply_service,
            vote_service=vote_service,
        )

    # Reply use cases
    @provide
    def get_create_reply_use_case(
        self,
        reply_service: ReplyService,
        post_service: PostService,
        user_service: UserService,
        forum_settings: ForumSettings,
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(
            reply_service=reply_service,
            post_service=post_service,
            user_service=user_service,
            forum_settings=forum_settings,
        )

    @provide
    def get_delete_reply_use_case(
        self,
        reply_service: ReplyService,
        post_service: PostService,
        vote_service: VoteService,
        solution_service: SolutionService,
    ) -> DeleteReplyUseCase:
        """Provide delete reply use case."""
        return DeleteReplyUseCase(
            reply_service=reply_service,
            post_service=post_service,
            vote_service=vote_service,
            solution_service=solution_service,
        )

    # Vote use cases
    @provide
    def get_cast_vote_use_case(
        self,
        vote_service: VoteService,
        post_service: PostService,
        reply_service: ReplyService,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            vote_service=vote_service,
            post_service=post_service,
            reply_service=reply_service,
        )

    @provide
    def get_get_vote_use_case(self, vote_service: VoteService) -> GetVoteUseCase:
        """Provide get vote use case."""
        return GetVoteUseCase(vote_service=vote_service)

    # Solution use cases
    @provide
    def get_mark_solution_use_case(
        self, post_service: PostService, solution_service: SolutionService
    ) -> MarkSolutionUseCase:
        """Provide mark solution use case."""
        return MarkSolutionUseCase(
            post_service=post_service, solution_service=solution_service
        )

    @provide
    def get_remove_solution_use_case(
        self, post_service: PostService, solution_service: SolutionService
    ) -> RemoveSolutionUseCase:
        """Provide remove solution use case."""
        return RemoveSolutionUseCase(
            post_service=post_service, solution_service=solution_service
        )

    # Stats
    @provide
    def get_get_stats_use_case(
        self, user_service: UserService, post_service: PostService
    ) -> GetStatsUseCase:
        """Provide stats use case."""
        return GetStatsUseCase(user_service=user_service, post_service=post_service)
