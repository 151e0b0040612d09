"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from forum.domain.model import Post, Reply, User
from forum.domain.value import Category, PostId, ReplyId, UserId, Username

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


def make_user(user_id: str = "user-1", username: str = "BraveAmberOtter") -> User:
    """Build a user with sensible defaults."""
    return User(
        id=UserId(user_id),
        username=Username(username),
        email=f"{user_id}@example.com",
    )


def make_post(
    author_id: str = "user-1",
    title: str = "Soldering iron keeps oxidizing",
    category: Category = Category.HARDWARE,
    created_at: datetime | None = None,
) -> Post:
    """Build a post with sensible defaults."""
    return Post(
        id=PostId(uuid4()),
        title=title,
        content="Which tip should I buy?",
        category=category,
        author_id=UserId(author_id),
        created_at=created_at or datetime.now(),
    )


def make_reply(
    post_id: PostId,
    author_id: str = "user-1",
    parent_reply_id: ReplyId | None = None,
    content: str = "Try a chisel tip",
    minutes: int = 0,
) -> Reply:
    """Build a reply created ``minutes`` after BASE_TIME."""
    return Reply(
        id=ReplyId(uuid4()),
        post_id=post_id,
        author_id=UserId(author_id),
        content=content,
        parent_reply_id=parent_reply_id,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )
