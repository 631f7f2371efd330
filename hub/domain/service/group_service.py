"""Group domain service."""

from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from hub.domain.error import BusinessRuleViolationError, NotFoundError, ValidationError
from hub.domain.model import Group, GroupMember, utcnow
from hub.domain.repository import GroupRepository
from hub.domain.value import GroupId, UserId

from .base import Service


class GroupService(Service):
    """Domain service for groups and their membership."""

    def __init__(self, group_repository: GroupRepository) -> None:
        """Initialize group service.

        Args:
            group_repository: Group repository
        """
        self.group_repository = group_repository

    async def get_group(self, group_id: GroupId) -> Group:
        """Get an active group.

        Args:
            group_id: Group ID

        Returns:
            Group entity

        Raises:
            NotFoundError: If the group does not exist or was deleted
        """
        with logfire.span("group_service.get_group", group_id=str(group_id)):
            group = await self.group_repository.find_by_id(group_id)
            if not group or not group.is_active:
                logfire.warn("Group not found", group_id=str(group_id))
                raise NotFoundError("Group", str(group_id))
            return group

    async def list_public(
        self,
        search: Optional[str] = None,
        field_of_study: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[Group], int]:
        """List active public groups, newest first.

        Returns:
            The requested page and the total number of matches
        """
        with logfire.span(
            "group_service.list_public",
            search=search,
            field_of_study=field_of_study,
            limit=limit,
            offset=offset,
        ):
            groups = await self.group_repository.find_public(
                search=search, field_of_study=field_of_study, limit=limit, offset=offset
            )
            total = await self.group_repository.count_public(
                search=search, field_of_study=field_of_study
            )
            logfire.info("Public groups listed", count=len(groups), total=total)
            return groups, total

    async def list_for_member(self, user_id: UserId) -> list[Group]:
        """Active groups the user owns or belongs to."""
        with logfire.span("group_service.list_for_member", user_id=str(user_id)):
            groups = await self.group_repository.find_by_member(user_id)
            logfire.info("Member groups listed", user_id=str(user_id), count=len(groups))
            return groups

    async def _ensure_name_available(
        self, name: str, exclude_id: Optional[GroupId] = None
    ) -> None:
        existing = await self.group_repository.find_active_by_name(
            name, exclude_id=exclude_id
        )
        if existing:
            logfire.warn("Group name taken", name=name)
            raise BusinessRuleViolationError("A group with this name already exists")

    async def create_group(
        self,
        owner_id: UserId,
        name: str,
        description: str,
        is_public: bool = True,
        field_of_study: Optional[str] = None,
    ) -> Group:
        """Create a group with its owner as the first member.

        Raises:
            ValidationError: If a field is invalid
            BusinessRuleViolationError: If an active group has the same name
        """
        with logfire.span("group_service.create_group", owner_id=str(owner_id)):
            name = name.strip()
            await self._ensure_name_available(name)

            try:
                group = Group(
                    id=GroupId(uuid4()),
                    name=name,
                    description=description.strip(),
                    owner_id=owner_id,
                    members=[GroupMember(user_id=owner_id)],
                    is_public=is_public,
                    field_of_study=field_of_study.strip() if field_of_study else None,
                )
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            saved = await self.group_repository.save(group)
            logfire.info("Group created", group_id=str(saved.id), owner_id=str(owner_id))
            return saved

    async def update_group(
        self,
        group: Group,
        name: Optional[str] = None,
        description: Optional[str] = None,
        is_public: Optional[bool] = None,
        field_of_study: Optional[str] = None,
    ) -> Group:
        """Change a group's settings. Only the given fields change.

        Raises:
            ValidationError: If a field is invalid
            BusinessRuleViolationError: If renaming onto an existing name
        """
        with logfire.span("group_service.update_group", group_id=str(group.id)):
            changes: dict = {}
            if name is not None and name.strip() != group.name:
                await self._ensure_name_available(name.strip(), exclude_id=group.id)
                changes["name"] = name.strip()
            if description is not None:
                changes["description"] = description.strip()
            if is_public is not None:
                changes["is_public"] = is_public
            if field_of_study is not None:
                changes["field_of_study"] = field_of_study.strip() or None

            data = group.model_dump(exclude={"member_count", "member_count_text"})
            data.update(changes, updated_at=utcnow())
            try:
                updated = Group.model_validate(data)
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            saved = await self.group_repository.save(updated)
            logfire.info("Group updated", group_id=str(group.id), fields=sorted(changes))
            return saved

    async def join(self, group: Group, user_id: UserId) -> Group:
        """Add a user to an active group. Visibility is checked by the caller.

        Raises:
            BusinessRuleViolationError: If the group is inactive or the user
                already belongs to it
        """
        with logfire.span("group_service.join", group_id=str(group.id), user_id=str(user_id)):
            if not group.is_active:
                raise BusinessRuleViolationError("This group is no longer active")
            if group.is_member(user_id) or group.is_owner(user_id):
                raise BusinessRuleViolationError("You are already a member of this group")

            saved = await self.group_repository.save(group.add_member(user_id))
            logfire.info("Member joined", group_id=str(group.id), user_id=str(user_id))
            return saved

    async def add_member(self, group: Group, user_id: UserId) -> Group:
        """Add a user regardless of visibility (invitation acceptance)."""
        with logfire.span(
            "group_service.add_member", group_id=str(group.id), user_id=str(user_id)
        ):
            saved = await self.group_repository.save(group.add_member(user_id))
            logfire.info("Member added", group_id=str(group.id), user_id=str(user_id))
            return saved

    async def leave(self, group: Group, user_id: UserId) -> Group:
        """Remove the caller from a group.

        Raises:
            BusinessRuleViolationError: If the user is not a member, or is the
                owner
        """
        with logfire.span("group_service.leave", group_id=str(group.id), user_id=str(user_id)):
            if not group.is_member(user_id):
                raise BusinessRuleViolationError("You are not a member of this group")
            if group.is_owner(user_id):
                raise BusinessRuleViolationError(
                    "Group owner cannot leave the group. Transfer ownership or delete the group instead."
                )

            saved = await self.group_repository.save(group.remove_member(user_id))
            logfire.info("Member left", group_id=str(group.id), user_id=str(user_id))
            return saved

    async def remove_member(self, group: Group, member_id: UserId) -> Group:
        """Remove another member (owner action).

        Raises:
            BusinessRuleViolationError: If removing the owner or a non-member
        """
        with logfire.span(
            "group_service.remove_member", group_id=str(group.id), member_id=str(member_id)
        ):
            if group.is_owner(member_id):
                raise BusinessRuleViolationError("Cannot remove the group owner")
            if not group.is_member(member_id):
                raise BusinessRuleViolationError("User is not a member of this group")

            saved = await self.group_repository.save(group.remove_member(member_id))
            logfire.info("Member removed", group_id=str(group.id), member_id=str(member_id))
            return saved

    async def deactivate(self, group: Group) -> Group:
        """Soft-delete a group."""
        with logfire.span("group_service.deactivate", group_id=str(group.id)):
            saved = await self.group_repository.save(
                group.model_copy(update={"is_active": False, "updated_at": utcnow()})
            )
            logfire.info("Group deactivated", group_id=str(group.id))
            return saved
