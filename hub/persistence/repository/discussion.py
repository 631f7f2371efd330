"""PostgreSQL implementations of Discussion and Reply repositories."""

from typing import Optional

from sqlalchemy import func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hub.domain.model import Discussion, Reply
from hub.domain.repository import DiscussionRepository, ReplyRepository
from hub.domain.value import DiscussionCategory, DiscussionId, GroupId, ReplyId
from hub.persistence.mappers import (
    discussion_to_dict,
    reply_to_dict,
    row_to_discussion,
    row_to_reply,
)
from hub.persistence.tables import discussions_table, replies_table


class PostgresDiscussionRepository(DiscussionRepository):
    """PostgreSQL implementation of DiscussionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _filters(
        self,
        group_id: GroupId,
        category: Optional[DiscussionCategory],
        search: Optional[str],
    ):
        filters = [discussions_table.c.group_id == group_id]
        if category is not None:
            filters.append(discussions_table.c.category == category.value)
        if search:
            pattern = f"%{search}%"
            filters.append(
                or_(
                    discussions_table.c.title.ilike(pattern),
                    discussions_table.c.content.ilike(pattern),
                )
            )
        return filters

    async def find_by_id(self, discussion_id: DiscussionId) -> Optional[Discussion]:
        """Find a discussion by ID."""
        stmt = select(discussions_table).where(discussions_table.c.id == discussion_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_discussion(dict(row)) if row else None

    async def find_by_group(
        self,
        group_id: GroupId,
        category: Optional[DiscussionCategory] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Discussion]:
        """List a group's discussions, pinned first, then by last activity."""
        stmt = (
            select(discussions_table)
            .where(*self._filters(group_id, category, search))
            .order_by(
                discussions_table.c.is_pinned.desc(),
                discussions_table.c.last_activity.desc(),
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_discussion(dict(row)) for row in result.mappings().all()]

    async def count_by_group(
        self,
        group_id: GroupId,
        category: Optional[DiscussionCategory] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count discussions matching the filters."""
        stmt = (
            select(func.count())
            .select_from(discussions_table)
            .where(*self._filters(group_id, category, search))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, discussion: Discussion) -> Discussion:
        """Save a discussion (create or update)."""
        discussion_dict = discussion_to_dict(discussion)

        existing = await self.find_by_id(discussion.id)
        if existing:
            stmt = (
                update(discussions_table)
                .where(discussions_table.c.id == discussion.id)
                .values(**discussion_dict)
            )
        else:
            stmt = insert(discussions_table).values(**discussion_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return discussion


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
        row = result.mappings().first()
        return row_to_reply(dict(row)) if row else None

    async def find_by_discussion(
        self, discussion_id: DiscussionId, limit: int = 20, offset: int = 0
    ) -> list[Reply]:
        """One page of replies, oldest first."""
        stmt = (
            select(replies_table)
            .where(replies_table.c.discussion_id == discussion_id)
            .order_by(replies_table.c.created_at, replies_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_reply(dict(row)) for row in result.mappings().all()]

    async def count_by_discussion(self, discussion_id: DiscussionId) -> int:
        """Count all replies in a discussion."""
        stmt = (
            select(func.count())
            .select_from(replies_table)
            .where(replies_table.c.discussion_id == discussion_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

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
