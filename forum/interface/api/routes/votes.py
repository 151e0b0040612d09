"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from forum.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVoteRequest,
    GetVoteUseCase,
    VoteItem,
)
from forum.domain.value import VotableType, VoteType
from forum.interface.api.errors import to_http_error

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote."""

    user_id: str
    vote_type: VoteType


async def _cast(
    use_case: CastVoteUseCase,
    votable_type: VotableType,
    votable_id: str,
    request: CastVoteAPIRequest,
) -> CastVoteResponse:
    try:
        return await use_case.execute(
            CastVoteRequest(
                votable_type=votable_type,
                votable_id=votable_id,
                user_id=request.user_id,
                vote_type=request.vote_type,
            )
        )
    except Exception as e:
        raise to_http_error(e, f"Vote on {votable_type.value}")


async def _get(
    use_case: GetVoteUseCase,
    votable_type: VotableType,
    votable_id: str,
    user_id: str | None,
) -> VoteItem:
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="userId query parameter is required",
        )

    try:
        vote = await use_case.execute(
            GetVoteRequest(
                votable_type=votable_type, votable_id=votable_id, user_id=user_id
            )
        )
    except Exception as e:
        raise to_http_error(e, f"Vote lookup on {votable_type.value}")

    if vote is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Vote not found"
        )
    return vote


@router.post("/posts/{post_id}/vote", response_model=CastVoteResponse)
async def vote_on_post(
    post_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Upvote or downvote a post.

    Voting again with the same type changes nothing; the other type
    switches the vote.
    """
    return await _cast(cast_vote_use_case, VotableType.POST, post_id, request)


@router.get("/posts/{post_id}/vote", response_model=VoteItem)
async def get_post_vote(
    post_id: str,
    get_vote_use_case: FromDishka[GetVoteUseCase],
    user_id: str | None = Query(default=None, alias="userId"),
) -> VoteItem:
    """Get the user's vote on a post (404 if they haven't voted)."""
    return await _get(get_vote_use_case, VotableType.POST, post_id, user_id)


@router.post("/replies/{reply_id}/vote", response_model=CastVoteResponse)
async def vote_on_reply(
    reply_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Upvote or downvote a reply."""
    return await _cast(cast_vote_use_case, VotableType.REPLY, reply_id, request)


@router.get("/replies/{reply_id}/vote", response_model=VoteItem)
async def get_reply_vote(
    reply_id: str,
    get_vote_use_case: FromDishka[GetVoteUseCase],
    user_id: str | None = Query(default=None, alias="userId"),
) -> VoteItem:
    """Get the user's vote on a reply (404 if they haven't voted)."""
    return await _get(get_vote_use_case, VotableType.REPLY, reply_id, user_id)
