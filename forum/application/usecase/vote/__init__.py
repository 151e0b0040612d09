"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_vote import GetVoteRequest, GetVoteUseCase
from .items import VoteItem

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetVoteRequest",
    "GetVoteUseCase",
    "VoteItem",
]
