"""User response items."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model import User


class UserItem(BaseModel):
    """Public view of a user."""

    user_id: str
    username: str
    email: str
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserItem":
        return cls(
            user_id=user.id,
            username=user.username.root,
            email=user.email,
            created_at=user.created_at,
        )
