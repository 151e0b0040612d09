"""Forum value objects.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from forum.domain.value.common import RootValueObject

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 30


class Category(str, Enum):
    """Closed set of post categories."""

    HARDWARE = "hardware"
    SOFTWARE = "software"


class VoteType(str, Enum):
    """Direction of a vote."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    POST = "post"
    REPLY = "reply"


class Username(RootValueObject[str]):
    """Public display name of a user.

    Must be 3-30 characters after trimming surrounding whitespace.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username length."""
        v = v.strip()
        if len(v) < USERNAME_MIN_LENGTH or len(v) > USERNAME_MAX_LENGTH:
            raise ValueError(
                f"Username must be {USERNAME_MIN_LENGTH}-{USERNAME_MAX_LENGTH} characters"
            )
        return v
