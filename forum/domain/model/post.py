"""Post aggregate root.

A post opens a thread in one of the forum categories. Vote tallies and the
reply count are denormalized onto the post and maintained by the services.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import Category, PostId, ReplyId, UserId


class Post(DomainModel):
    """Post aggregate root.

    Business rules:
    - Only the author may delete the post or change its solution
    - At most one reply is the accepted solution (``solution_id``)
    - Deleting the post removes its replies and every vote on them
    """

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=10000)
    category: Category
    author_id: UserId
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    reply_count: int = Field(default=0, ge=0)
    solution_id: Optional[ReplyId] = None
    created_at: datetime = Field(default_factory=datetime.now)
