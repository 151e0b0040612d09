"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from forum.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostDetailsUseCase,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostItem,
)
from forum.domain.value import Category
from forum.interface.api.errors import to_http_error

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    category: Category | None = Query(default=None),
    limit: int = Query(default=30, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListPostsResponse:
    """List posts newest first.

    Args:
        list_posts_use_case: List posts use case from DI
        category: Optional category filter
        limit: Page size (1-100)
        offset: Number of posts to skip
    """
    try:
        return await list_posts_use_case.execute(
            ListPostsRequest(category=category, limit=limit, offset=offset)
        )
    except Exception as e:
        raise to_http_error(e, "Post listing")


@router.post("", response_model=PostItem, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> PostItem:
    """Create a new post.

    Raises:
        HTTPException: 400 if invalid, 404 if the author doesn't exist
    """
    try:
        return await create_post_use_case.execute(request)
    except Exception as e:
        raise to_http_error(e, "Post creation")


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get a post with its replies, flat and threaded.

    Raises:
        HTTPException: 404 if the post doesn't exist
    """
    try:
        return await get_post_use_case.execute(post_id)
    except Exception as e:
        raise to_http_error(e, "Post lookup")


@router.get("/{post_id}/details", response_model=PostItem)
async def get_post_details(
    post_id: str,
    get_post_details_use_case: FromDishka[GetPostDetailsUseCase],
) -> PostItem:
    """Get a post without its replies."""
    try:
        return await get_post_details_use_case.execute(post_id)
    except Exception as e:
        raise to_http_error(e, "Post lookup")


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    user_id: str | None = Query(default=None, alias="userId"),
) -> DeletePostResponse:
    """Delete a post with all its replies and votes.

    Only the author may delete a post.

    Raises:
        HTTPException: 401 without userId, 403 for non-authors, 404 if missing
    """
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User ID is required",
        )

    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=post_id, user_id=user_id)
        )
    except Exception as e:
        raise to_http_error(e, "Post deletion")
