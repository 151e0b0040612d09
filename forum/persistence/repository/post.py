"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Post
from forum.domain.repository import PostRepository
from forum.domain.value import Category, PostId, ReplyId
from forum.persistence.mappers import post_to_dict, row_to_post
from forum.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def find_all(
        self,
        category: Optional[Category] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts newest first, with filtering and pagination."""
        with logfire.span(
            "post_repository.find_all",
            category=category.value if category else None,
            limit=limit,
            offset=offset,
        ):
            stmt = select(posts_table)
            if category:
                stmt = stmt.where(posts_table.c.category == category.value)
            stmt = (
                stmt.order_by(desc(posts_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]
            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(self, category: Optional[Category] = None) -> int:
        """Count posts, optionally within one category."""
        stmt = select(func.count()).select_from(posts_table)
        if category:
            stmt = stmt.where(posts_table.c.category == category.value)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            post_dict = post_to_dict(post)
            existing = await self.find_by_id(post.id)
            if existing:
                stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
            else:
                stmt = insert(posts_table).values(**post_dict)
            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def adjust_votes(
        self, post_id: PostId, upvotes_delta: int, downvotes_delta: int
    ) -> Optional[Post]:
        """Shift both vote tallies in one relative update (minimum 0)."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(
                upvotes=func.greatest(posts_table.c.upvotes + upvotes_delta, 0),
                downvotes=func.greatest(posts_table.c.downvotes + downvotes_delta, 0),
            )
            .returning(posts_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_post(row._asdict()) if row else None

    async def adjust_reply_count(self, post_id: PostId, delta: int) -> None:
        """Shift the reply count in one relative update (minimum 0)."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(reply_count=func.greatest(posts_table.c.reply_count + delta, 0))
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def set_solution(
        self, post_id: PostId, reply_id: Optional[ReplyId]
    ) -> Optional[Post]:
        """Set or clear the accepted solution of a post."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(solution_id=reply_id)
            .returning(posts_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_post(row._asdict()) if row else None
