"""In-memory group repository for testing."""

from typing import Optional

from hub.domain.model import Group
from hub.domain.repository import GroupRepository
from hub.domain.value import GroupId, UserId


class InMemoryGroupRepository(GroupRepository):
    """In-memory implementation of GroupRepository for testing."""

    def __init__(self) -> None:
        self._groups: dict[GroupId, Group] = {}

    def _matches(
        self, group: Group, search: Optional[str], field_of_study: Optional[str]
    ) -> bool:
        if not (group.is_active and group.is_public):
            return False
        if search:
            needle = search.lower()
            if needle not in group.name.lower() and needle not in group.description.lower():
                return False
        if field_of_study:
            if not group.field_of_study:
                return False
            if field_of_study.lower() not in group.field_of_study.lower():
                return False
        return True

    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        """Find a group by ID."""
        return self._groups.get(group_id)

    async def find_active_by_name(
        self, name: str, exclude_id: Optional[GroupId] = None
    ) -> Optional[Group]:
        """Find an active group with exactly this name."""
        for group in self._groups.values():
            if group.is_active and group.name == name and group.id != exclude_id:
                return group
        return None

    async def find_public(
        self,
        search: Optional[str] = None,
        field_of_study: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Group]:
        """List active public groups, newest first."""
        groups = [
            g for g in self._groups.values() if self._matches(g, search, field_of_study)
        ]
        groups.sort(key=lambda g: g.created_at, reverse=True)
        return groups[offset : offset + limit]

    async def count_public(
        self,
        search: Optional[str] = None,
        field_of_study: Optional[str] = None,
    ) -> int:
        """Count active public groups matching the filters."""
        return sum(
            1 for g in self._groups.values() if self._matches(g, search, field_of_study)
        )

    async def find_by_member(self, user_id: UserId) -> list[Group]:
        """List active groups the user owns or belongs to."""
        groups = [
            g
            for g in self._groups.values()
            if g.is_active and (g.owner_id == user_id or g.is_member(user_id))
        ]
        groups.sort(key=lambda g: g.created_at, reverse=True)
        return groups

    async def save(self, group: Group) -> Group:
        """Save a group (create or update)."""
        self._groups[group.id] = group
        return group
