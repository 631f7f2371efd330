"""PostgreSQL implementation of Group repository."""

from typing import Any, Optional

from sqlalchemy import delete, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hub.domain.model import Group
from hub.domain.repository import GroupRepository
from hub.domain.value import GroupId, UserId
from hub.persistence.mappers import group_to_dict, members_to_rows, row_to_group
from hub.persistence.tables import group_members_table, groups_table


class PostgresGroupRepository(GroupRepository):
    """PostgreSQL implementation of GroupRepository.

    Members live in ``group_members`` and are loaded with their group.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _hydrate(self, rows: list[Any]) -> list[Group]:
        """Attach members to group rows with one extra query."""
        if not rows:
            return []
        group_ids = [row["id"] for row in rows]
        stmt = (
            select(group_members_table)
            .where(group_members_table.c.group_id.in_(group_ids))
            .order_by(group_members_table.c.joined_at)
        )
        result = await self.session.execute(stmt)

        members: dict[Any, list[dict]] = {group_id: [] for group_id in group_ids}
        for member in result.mappings().all():
            members[member["group_id"]].append(dict(member))

        return [row_to_group(dict(row), members[row["id"]]) for row in rows]

    def _public_filters(self, search: Optional[str], field_of_study: Optional[str]):
        filters = [groups_table.c.is_active.is_(True), groups_table.c.is_public.is_(True)]
        if search:
            pattern = f"%{search}%"
            filters.append(
                or_(
                    groups_table.c.name.ilike(pattern),
                    groups_table.c.description.ilike(pattern),
                )
            )
        if field_of_study:
            filters.append(groups_table.c.field_of_study.ilike(f"%{field_of_study}%"))
        return filters

    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        """Find a group by ID, with its members."""
        stmt = select(groups_table).where(groups_table.c.id == group_id)
        result = await self.session.execute(stmt)
        groups = await self._hydrate(result.mappings().all())
        return groups[0] if groups else None

    async def find_active_by_name(
        self, name: str, exclude_id: Optional[GroupId] = None
    ) -> Optional[Group]:
        """Find an active group with exactly this name."""
        stmt = select(groups_table).where(
            groups_table.c.name == name, groups_table.c.is_active.is_(True)
        )
        if exclude_id is not None:
            stmt = stmt.where(groups_table.c.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        groups = await self._hydrate(result.mappings().all())
        return groups[0] if groups else None

    async def find_public(
        self,
        search: Optional[str] = None,
        field_of_study: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Group]:
        """List active public groups, newest first."""
        stmt = (
            select(groups_table)
            .where(*self._public_filters(search, field_of_study))
            .order_by(groups_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return await self._hydrate(result.mappings().all())

    async def count_public(
        self,
        search: Optional[str] = None,
        field_of_study: Optional[str] = None,
    ) -> int:
        """Count active public groups matching the filters."""
        stmt = (
            select(func.count())
            .select_from(groups_table)
            .where(*self._public_filters(search, field_of_study))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_member(self, user_id: UserId) -> list[Group]:
        """List active groups the user owns or belongs to, newest first."""
        member_of = select(group_members_table.c.group_id).where(
            group_members_table.c.user_id == user_id
        )
        stmt = (
            select(groups_table)
            .where(
                groups_table.c.is_active.is_(True),
                or_(
                    groups_table.c.owner_id == user_id,
                    groups_table.c.id.in_(member_of),
                ),
            )
            .order_by(groups_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return await self._hydrate(result.mappings().all())

    async def save(self, group: Group) -> Group:
        """Save a group and replace its member list."""
        group_dict = group_to_dict(group)

        exists = await self.session.execute(
            select(groups_table.c.id).where(groups_table.c.id == group.id)
        )
        if exists.first():
            await self.session.execute(
                update(groups_table)
                .where(groups_table.c.id == group.id)
                .values(**group_dict)
            )
        else:
            await self.session.execute(insert(groups_table).values(**group_dict))

        await self.session.execute(
            delete(group_members_table).where(group_members_table.c.group_id == group.id)
        )
        member_rows = members_to_rows(group)
        if member_rows:
            await self.session.execute(insert(group_members_table), member_rows)

        await self.session.flush()
        return group
