"""PostgreSQL implementation of Vote repository."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Vote
from forum.domain.repository import VoteRepository
from forum.domain.value import UserId, VotableType, VoteId, VoteType
from forum.persistence.mappers import row_to_vote, vote_to_dict
from forum.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Save a new vote (unique per user and item)."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> Optional[Vote]:
        """Change the direction of an existing vote."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(vote_type=vote_type.value)
            .returning(votes_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict()) if row else None

    async def delete_by_votables(
        self,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> int:
        """Delete every vote on the given items."""
        if not votable_ids:
            return 0
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id.in_(votable_ids),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def count_by_votable(self, votable_type: VotableType, votable_id: UUID) -> int:
        """Count votes on a specific item."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
