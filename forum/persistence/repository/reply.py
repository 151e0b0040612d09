"""PostgreSQL implementation of Reply repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Reply
from forum.domain.repository import ReplyRepository
from forum.domain.value import PostId, ReplyId
from forum.persistence.mappers import reply_to_dict, row_to_reply
from forum.persistence.tables import replies_table


class PostgresReplyRepository(ReplyRepository):
    """PostgreSQL implementation of ReplyRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID."""
        stmt = select(replies_table).where(replies_table.c.id == reply_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reply(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Reply]:
        """Find all replies of a post, oldest first."""
        with logfire.span("reply_repository.find_by_post", post_id=str(post_id)):
            stmt = (
                select(replies_table)
                .where(replies_table.c.post_id == post_id)
                .order_by(replies_table.c.created_at)
            )
            result = await self.session.execute(stmt)
            return [row_to_reply(row._asdict()) for row in result.fetchall()]

    async def save(self, reply: Reply) -> Reply:
        """Save a reply (create or update)."""
        reply_dict = reply_to_dict(reply)
        existing = await self.find_by_id(reply.id)
        if existing:
            stmt = (
                update(replies_table)
                .where(replies_table.c.id == reply.id)
                .values(**reply_dict)
            )
        else:
            stmt = insert(replies_table).values(**reply_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return reply

    async def delete(self, reply_id: ReplyId) -> bool:
        """Delete a reply (hard delete). Children are kept."""
        stmt = delete(replies_table).where(replies_table.c.id == reply_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every reply of a post."""
        stmt = delete(replies_table).where(replies_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def adjust_votes(
        self, reply_id: ReplyId, upvotes_delta: int, downvotes_delta: int
    ) -> Optional[Reply]:
        """Shift both vote tallies in one relative update (minimum 0)."""
        stmt = (
            update(replies_table)
            .where(replies_table.c.id == reply_id)
            .values(
                upvotes=func.greatest(replies_table.c.upvotes + upvotes_delta, 0),
                downvotes=func.greatest(
                    replies_table.c.downvotes + downvotes_delta, 0
                ),
            )
            .returning(replies_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_reply(row._asdict()) if row else None

    async def set_solution_flag(
        self, reply_id: ReplyId, is_solution: bool
    ) -> Optional[Reply]:
        """Set or clear the solution flag on a reply."""
        stmt = (
            update(replies_table)
            .where(replies_table.c.id == reply_id)
            .values(is_solution=is_solution)
            .returning(replies_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_reply(row._asdict()) if row else None
