"""Mock persistence providers for testing."""

from dishka import Scope, provide

from forum.domain.repository import (
    PostRepository,
    ReplyRepository,
    UserRepository,
    VoteRepository,
)
from forum.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryReplyRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from forum.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so state survives across the requests of
    one test client; every test builds its own container and so starts
    from empty repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_reply_repository(self) -> ReplyRepository:
        """Provide in-memory reply repository."""
        return InMemoryReplyRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()
