"""Reply entity.

Replies are stored flat per post. ``parent_reply_id`` links a reply to the
reply it answers; the thread view folds any depth into two display levels.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import PostId, ReplyId, UserId


class Reply(DomainModel):
    """Reply to a post or to another reply on the same post."""

    id: ReplyId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    parent_reply_id: Optional[ReplyId] = None
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    is_solution: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
