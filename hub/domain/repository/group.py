"""Group repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hub.domain.model import Group
from hub.domain.value import GroupId, UserId


class GroupRepository(ABC):
    """Repository for Group aggregate (group plus member list)."""

    @abstractmethod
    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        """Find a group by ID, active or not.

        Args:
            group_id: The group's unique identifier

        Returns:
            The group if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active_by_name(
        self, name: str, exclude_id: Optional[GroupId] = None
    ) -> Optional[Group]:
        """Find an active group whose name matches case-insensitively.

        Args:
            name: Group name
            exclude_id: Group to ignore (the one being renamed)

        Returns:
            The matching group if any
        """
        pass

    @abstractmethod
    async def find_public(
        self,
        search: Optional[str] = None,
        field_of_study: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Group]:
        """List active public groups, newest first.

        Args:
            search: Case-insensitive substring of name or description
            field_of_study: Case-insensitive substring of field of study
            limit: Maximum number of groups to return
            offset: Number of groups to skip

        Returns:
            List of groups
        """
        pass

    @abstractmethod
    async def count_public(
        self,
        search: Optional[str] = None,
        field_of_study: Optional[str] = None,
    ) -> int:
        """Count active public groups matching the same filters as find_public."""
        pass

    @abstractmethod
    async def find_by_member(self, user_id: UserId) -> list[Group]:
        """List active groups the user owns or belongs to, newest first.

        Args:
            user_id: Member user ID

        Returns:
            List of groups
        """
        pass

    @abstractmethod
    async def save(self, group: Group) -> Group:
        """Save a group and replace its member list.

        Args:
            group: The group to save

        Returns:
            The saved group
        """
        pass
