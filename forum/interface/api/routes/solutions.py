"""Accepted solution routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from forum.application.usecase.solution import (
    MarkSolutionRequest,
    MarkSolutionUseCase,
    RemoveSolutionRequest,
    RemoveSolutionUseCase,
    SolutionResponse,
)
from forum.interface.api.errors import to_http_error

router = APIRouter(prefix="/posts", tags=["solutions"], route_class=DishkaRoute)


class SolutionAPIRequest(BaseModel):
    """Caller identity for solution changes."""

    user_id: str


@router.post("/{post_id}/replies/{reply_id}/solution", response_model=SolutionResponse)
async def mark_solution(
    post_id: str,
    reply_id: str,
    request: SolutionAPIRequest,
    mark_solution_use_case: FromDishka[MarkSolutionUseCase],
) -> SolutionResponse:
    """Accept a reply as the solution. Only the post author may do this.

    Raises:
        HTTPException: 403 for non-authors, 404 if post or reply is missing,
            400 if the reply belongs to another post
    """
    try:
        return await mark_solution_use_case.execute(
            MarkSolutionRequest(
                post_id=post_id, reply_id=reply_id, user_id=request.user_id
            )
        )
    except Exception as e:
        raise to_http_error(e, "Mark solution")


@router.delete("/{post_id}/solution", response_model=SolutionResponse)
async def remove_solution(
    post_id: str,
    request: SolutionAPIRequest,
    remove_solution_use_case: FromDishka[RemoveSolutionUseCase],
) -> SolutionResponse:
    """Clear the accepted solution. Only the post author may do this."""
    try:
        return await remove_solution_use_case.execute(
            RemoveSolutionRequest(post_id=post_id, user_id=request.user_id)
        )
    except Exception as e:
        raise to_http_error(e, "Remove solution")
