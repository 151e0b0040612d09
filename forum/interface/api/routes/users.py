"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from forum.application.usecase.user import (
    GetUserUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
    UpdateUsernameRequest,
    UpdateUsernameUseCase,
    UserItem,
)
from forum.interface.api.errors import to_http_error

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.post("", response_model=UserItem, status_code=status.HTTP_201_CREATED)
async def register_user(
    request: RegisterUserRequest,
    register_user_use_case: FromDishka[RegisterUserUseCase],
) -> UserItem:
    """Register the authenticated user.

    Called after every sign-in; an existing user is returned unchanged.
    """
    try:
        return await register_user_use_case.execute(request)
    except Exception as e:
        raise to_http_error(e, "User registration")


@router.get("/{user_id}", response_model=UserItem)
async def get_user(
    user_id: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserItem:
    """Get a user by id.

    Raises:
        HTTPException: 404 if the user doesn't exist
    """
    try:
        return await get_user_use_case.execute(user_id)
    except Exception as e:
        raise to_http_error(e, "User lookup")


class UpdateUsernameAPIRequest(BaseModel):
    """API request for changing a username."""

    username: str


@router.patch("/{user_id}/username", response_model=UserItem)
async def update_username(
    user_id: str,
    request: UpdateUsernameAPIRequest,
    update_username_use_case: FromDishka[UpdateUsernameUseCase],
) -> UserItem:
    """Change a user's username.

    Raises:
        HTTPException: 400 if invalid or taken, 404 if the user doesn't exist
    """
    try:
        return await update_username_use_case.execute(
            UpdateUsernameRequest(user_id=user_id, username=request.username)
        )
    except Exception as e:
        raise to_http_error(e, "Username update")
