"""Domain services."""

from .base import Service
from .post_service import PostService
from .quote import compose_quoted_reply, strip_quote
from .reply_service import ReplyService
from .solution_service import SolutionService
from .thread import ReplyThread, assemble_thread
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "PostService",
    "ReplyService",
    "ReplyThread",
    "Service",
    "SolutionService",
    "UserService",
    "VoteService",
    "assemble_thread",
    "compose_quoted_reply",
    "strip_quote",
]
