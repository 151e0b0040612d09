"""Domain model entities for the forum."""

from forum.domain.model.post import Post
from forum.domain.model.reply import Reply
from forum.domain.model.user import User
from forum.domain.model.vote import Vote

__all__ = [
    "User",
    "Post",
    "Reply",
    "Vote",
]
