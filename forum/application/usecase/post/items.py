"""Post and reply response items."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model import Post, Reply
from forum.domain.service import ReplyThread
from forum.domain.value import Category


class PostItem(BaseModel):
    """Post in API responses."""

    post_id: str
    title: str
    content: str
    category: Category
    author_id: str
    upvotes: int
    downvotes: int
    reply_count: int
    solution_id: str | None
    created_at: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostItem":
        return cls(
            post_id=str(post.id),
            title=post.title,
            content=post.content,
            category=post.category,
            author_id=post.author_id,
            upvotes=post.upvotes,
            downvotes=post.downvotes,
            reply_count=post.reply_count,
            solution_id=str(post.solution_id) if post.solution_id else None,
            created_at=post.created_at,
        )


class ReplyItem(BaseModel):
    """Reply in API responses."""

    reply_id: str
    post_id: str
    author_id: str
    content: str
    parent_reply_id: str | None
    upvotes: int
    downvotes: int
    is_solution: bool
    created_at: datetime

    @classmethod
    def from_domain(cls, reply: Reply) -> "ReplyItem":
        return cls(
            reply_id=str(reply.id),
            post_id=str(reply.post_id),
            author_id=reply.author_id,
            content=reply.content,
            parent_reply_id=str(reply.parent_reply_id) if reply.parent_reply_id else None,
            upvotes=reply.upvotes,
            downvotes=reply.downvotes,
            is_solution=reply.is_solution,
            created_at=reply.created_at,
        )


class ThreadItem(BaseModel):
    """Two-level reply thread.

    ``children`` maps a top-level reply id to all replies nested beneath it,
    oldest first.
    """

    top_level: list[ReplyItem]
    children: dict[str, list[ReplyItem]]

    @classmethod
    def from_domain(cls, thread: ReplyThread) -> "ThreadItem":
        return cls(
            top_level=[ReplyItem.from_domain(r) for r in thread.top_level],
            children={
                str(parent_id): [ReplyItem.from_domain(r) for r in replies]
                for parent_id, replies in thread.children.items()
            },
        )
