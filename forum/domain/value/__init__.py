"""Domain value objects for the forum."""

from forum.domain.value.identifiers import PostId, ReplyId, UserId, VoteId
from forum.domain.value.types import Category, Username, VotableType, VoteType

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "ReplyId",
    "VoteId",
    # Types
    "Category",
    "Username",
    "VotableType",
    "VoteType",
]
