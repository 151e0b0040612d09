"""User aggregate root.

Users are created the first time they authenticate with the identity
provider; the provider's subject id becomes the forum user id.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import UserId, Username


class User(DomainModel):
    """User aggregate root.

    The username is unique across the forum and may be changed by its owner.
    """

    id: UserId
    username: Username
    email: str = Field(min_length=1, max_length=255)
    created_at: datetime = Field(default_factory=datetime.now)
