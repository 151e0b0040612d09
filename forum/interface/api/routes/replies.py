"""Reply routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from forum.application.usecase.post import ReplyItem
from forum.application.usecase.reply import (
    CreateReplyRequest,
    CreateReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyResponse,
    DeleteReplyUseCase,
)
from forum.interface.api.errors import to_http_error

router = APIRouter(tags=["replies"], route_class=DishkaRoute)


class CreateReplyAPIRequest(BaseModel):
    """API request for creating a reply."""

    content: str = Field(min_length=1, max_length=10000)
    author_id: str
    parent_reply_id: str | None = None
    quote: bool = True


@router.post(
    "/posts/{post_id}/replies",
    response_model=ReplyItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    post_id: str,
    request: CreateReplyAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
) -> ReplyItem:
    """Reply to a post, or to another reply when parent_reply_id is given.

    A reply to a reply starts with a quote of it unless ``quote`` is false.

    Raises:
        HTTPException: 400 if invalid, 404 if the post, author or parent is missing
    """
    try:
        return await create_reply_use_case.execute(
            CreateReplyRequest(
                post_id=post_id,
                author_id=request.author_id,
                content=request.content,
                parent_reply_id=request.parent_reply_id,
                quote=request.quote,
            )
        )
    except Exception as e:
        raise to_http_error(e, "Reply creation")


@router.delete("/replies/{reply_id}", response_model=DeleteReplyResponse)
async def delete_reply(
    reply_id: str,
    delete_reply_use_case: FromDishka[DeleteReplyUseCase],
    user_id: str | None = Query(default=None, alias="userId"),
) -> DeleteReplyResponse:
    """Delete a reply. Only the author may delete it.

    Raises:
        HTTPException: 401 without userId, 403 for non-authors, 404 if missing
    """
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User ID is required",
        )

    try:
        return await delete_reply_use_case.execute(
            DeleteReplyRequest(reply_id=reply_id, user_id=user_id)
        )
    except Exception as e:
        raise to_http_error(e, "Reply deletion")
