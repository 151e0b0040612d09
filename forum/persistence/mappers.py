"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from forum.domain.model import Post, Reply, User, Vote
from forum.domain.value import (
    Category,
    PostId,
    ReplyId,
    UserId,
    Username,
    VotableType,
    VoteId,
    VoteType,
)


def _uuid(value: Any) -> UUID | None:
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(row["id"]),
        username=Username(row["username"]),
        email=row["email"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "username": user.username.root,
        "email": user.email,
        "created_at": user.created_at,
    }


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    solution_id = _uuid(row.get("solution_id"))
    return Post(
        id=PostId(_uuid(row["id"])),  # type: ignore[arg-type]
        title=row["title"],
        content=row["content"],
        category=Category(row["category"]),
        author_id=UserId(row["author_id"]),
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        reply_count=row["reply_count"],
        solution_id=ReplyId(solution_id) if solution_id else None,
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    data = post.model_dump()
    data["category"] = post.category.value
    return data


def row_to_reply(row: Dict[str, Any]) -> Reply:
    """Convert database row to Reply domain model.

    Args:
        row: Database row as dict

    Returns:
        Reply domain model
    """
    parent_id = _uuid(row.get("parent_reply_id"))
    return Reply(
        id=ReplyId(_uuid(row["id"])),  # type: ignore[arg-type]
        post_id=PostId(_uuid(row["post_id"])),  # type: ignore[arg-type]
        author_id=UserId(row["author_id"]),
        content=row["content"],
        parent_reply_id=ReplyId(parent_id) if parent_id else None,
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        is_solution=row["is_solution"],
        created_at=row["created_at"],
    )


def reply_to_dict(reply: Reply) -> Dict[str, Any]:
    """Convert Reply domain model to database dict."""
    return reply.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),  # type: ignore[arg-type]
        user_id=UserId(row["user_id"]),
        votable_type=VotableType(row["votable_type"]),
        votable_id=_uuid(row["votable_id"]),  # type: ignore[arg-type]
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "id": vote.id,
        "user_id": vote.user_id,
        "votable_type": vote.votable_type.value,
        "votable_id": vote.votable_id,
        "vote_type": vote.vote_type.value,
        "created_at": vote.created_at,
    }
