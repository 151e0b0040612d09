"""PostgreSQL repository implementations."""

from forum.persistence.repository.post import PostgresPostRepository
from forum.persistence.repository.reply import PostgresReplyRepository
from forum.persistence.repository.user import PostgresUserRepository
from forum.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresReplyRepository",
    "PostgresVoteRepository",
]
