"""In-memory reply repository for testing."""

from typing import Optional

from forum.domain.model.reply import Reply
from forum.domain.repository.reply import ReplyRepository
from forum.domain.value import PostId, ReplyId


class InMemoryReplyRepository(ReplyRepository):
    """In-memory implementation of ReplyRepository for testing."""

    def __init__(self) -> None:
        self._replies: dict[ReplyId, Reply] = {}

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID."""
        return self._replies.get(reply_id)

    async def find_by_post(self, post_id: PostId) -> list[Reply]:
        """Find all replies of a post, oldest first."""
        replies = [r for r in self._replies.values() if r.post_id == post_id]
        return sorted(replies, key=lambda r: r.created_at)

    async def save(self, reply: Reply) -> Reply:
        """Save a reply."""
        self._replies[reply.id] = reply
        return reply

    async def delete(self, reply_id: ReplyId) -> bool:
        """Delete a reply. Children are kept."""
        return self._replies.pop(reply_id, None) is not None

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every reply of a post."""
        doomed = [r.id for r in self._replies.values() if r.post_id == post_id]
        for reply_id in doomed:
            del self._replies[reply_id]
        return len(doomed)

    async def adjust_votes(
        self, reply_id: ReplyId, upvotes_delta: int, downvotes_delta: int
    ) -> Optional[Reply]:
        """Shift both vote tallies (minimum 0)."""
        reply = self._replies.get(reply_id)
        if not reply:
            return None
        updated = reply.model_copy(
            update={
                "upvotes": max(reply.upvotes + upvotes_delta, 0),
                "downvotes": max(reply.downvotes + downvotes_delta, 0),
            }
        )
        self._replies[reply_id] = updated
        return updated

    async def set_solution_flag(
        self, reply_id: ReplyId, is_solution: bool
    ) -> Optional[Reply]:
        """Set or clear the solution flag on a reply."""
        reply = self._replies.get(reply_id)
        if not reply:
            return None
        updated = reply.model_copy(update={"is_solution": is_solution})
        self._replies[reply_id] = updated
        return updated
