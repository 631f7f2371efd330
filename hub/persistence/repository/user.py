"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hub.domain.model import User
from hub.domain.repository import UserRepository
from hub.domain.value import AcademicLevel, Email, UserId
from hub.persistence.mappers import row_to_user, user_to_dict
from hub.persistence.tables import users_table


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
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by (lowercased) email."""
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find several users in one query."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
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

    async def count(
        self,
        is_active: Optional[bool] = None,
        is_email_verified: Optional[bool] = None,
    ) -> int:
        """Count users, optionally filtered by flags."""
        stmt = select(func.count()).select_from(users_table)
        if is_active is not None:
            stmt = stmt.where(users_table.c.is_active == is_active)
        if is_email_verified is not None:
            stmt = stmt.where(users_table.c.is_email_verified == is_email_verified)

        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_recent(self, limit: int = 5) -> list[User]:
        """Most recently registered users, newest first."""
        stmt = (
            select(users_table)
            .order_by(users_table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def count_by_academic_level(self) -> dict[AcademicLevel, int]:
        """Number of users per academic level."""
        stmt = select(
            users_table.c.academic_level, func.count().label("count")
        ).group_by(users_table.c.academic_level)
        result = await self.session.execute(stmt)
        return {AcademicLevel(row.academic_level): row.count for row in result.all()}
