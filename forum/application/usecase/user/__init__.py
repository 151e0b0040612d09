"""User use cases."""

from .get_user import GetUserUseCase
from .items import UserItem
from .register_user import RegisterUserRequest, RegisterUserUseCase
from .update_username import UpdateUsernameRequest, UpdateUsernameUseCase

__all__ = [
    "GetUserUseCase",
    "RegisterUserRequest",
    "RegisterUserUseCase",
    "UpdateUsernameRequest",
    "UpdateUsernameUseCase",
    "UserItem",
]
