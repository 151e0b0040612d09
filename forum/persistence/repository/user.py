"""PostgreSQL implementation of User repository."""

from typing import Optional

import logfire
from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import UserId, Username
from forum.persistence.mappers import row_to_user, user_to_dict
from forum.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        with logfire.span("user_repository.save", user_id=str(user.id)):
            user_dict = user_to_dict(user)
            existing = await self.find_by_id(user.id)
            if existing:
                stmt = (
                    update(users_table)
                    .where(users_table.c.id == user.id)
                    .values(**user_dict)
                )
            else:
                stmt = insert(users_table).values(**user_dict)
            await self.session.execute(stmt)
            await self.session.flush()
            return user

    async def update_username(
        self, user_id: UserId, username: Username
    ) -> Optional[User]:
        """Change a user's username."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(username=username.root)
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_user(row._asdict()) if row else None

    async def count(self) -> int:
        """Count registered users."""
        result = await self.session.execute(
            select(func.count()).select_from(users_table)
        )
        return result.scalar() or 0
