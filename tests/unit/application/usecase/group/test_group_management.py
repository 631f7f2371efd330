"""Unit tests for the group management use cases."""

import pytest

from hub.application.usecase.group import (
    CreateGroupRequest,
    CreateGroupUseCase,
    DeleteGroupRequest,
    DeleteGroupUseCase,
    GetGroupRequest,
    GetGroupUseCase,
    GetMyGroupsRequest,
    GetMyGroupsUseCase,
    ListGroupsRequest,
    ListGroupsUseCase,
    UpdateGroupRequest,
    UpdateGroupUseCase,
)
from hub.domain.error import NotAuthorizedError, NotFoundError
from hub.domain.service import UserService
from hub.domain.value import GroupRole
from tests.conftest import register_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def new_group(unit_env, owner, name="Neuro Lab", is_public=True):
    create = await unit_env.get(CreateGroupUseCase)
    return await create.execute(
        CreateGroupRequest(
            user_id=str(owner.id),
            name=name,
            description="Reading group",
            is_public=is_public,
        )
    )


class TestGroupManagement:
    """Tests for creating, listing, updating and deleting groups."""

    @pytest.mark.asyncio
    async def test_owner_sees_role_and_profile(self, unit_env):
        user_service = await unit_env.get(UserService)
        owner = await register_user(user_service)

        view = await new_group(unit_env, owner)

        assert view.user_role == GroupRole.OWNER
        assert view.owner.full_name == "Alice Smith"
        assert view.member_count == 1

    @pytest.mark.asyncio
    async def test_public_listing_hides_private_groups(self, unit_env):
        """Visitors only see public groups; members see theirs in my-groups."""
        # Arrange
        user_service = await unit_env.get(UserService)
        owner = await register_user(user_service)
        await new_group(unit_env, owner, name="Open Lab")
        await new_group(unit_env, owner, name="Closed Lab", is_public=False)
        list_groups = await unit_env.get(ListGroupsUseCase)
        my_groups = await unit_env.get(GetMyGroupsUseCase)

        # Act
        listed = await list_groups.execute(ListGroupsRequest())
        mine = await my_groups.execute(GetMyGroupsRequest(user_id=str(owner.id)))

        # Assert
        assert [g.name for g in listed.groups] == ["Open Lab"]
        assert listed.pagination.total == 1
        assert all(g.user_role == GroupRole.VISITOR for g in listed.groups)
        assert {g.name for g in mine} == {"Open Lab", "Closed Lab"}

    @pytest.mark.asyncio
    async def test_only_owner_updates(self, unit_env):
        user_service = await unit_env.get(UserService)
        owner = await register_user(user_service)
        other = await register_user(user_service, email="bob@uni.edu")
        group = await new_group(unit_env, owner)
        update = await unit_env.get(UpdateGroupUseCase)

        with pytest.raises(NotAuthorizedError):
            await update.execute(
                UpdateGroupRequest(
                    group_id=group.id, user_id=str(other.id), name="Hijacked"
                )
            )
        updated = await update.execute(
            UpdateGroupRequest(group_id=group.id, user_id=str(owner.id), is_public=False)
        )

        assert updated.name == "Neuro Lab"
        assert updated.is_public is False

    @pytest.mark.asyncio
    async def test_deleted_group_disappears(self, unit_env):
        """Deletion deactivates the group; it is then reported as not found."""
        user_service = await unit_env.get(UserService)
        owner = await register_user(user_service)
        group = await new_group(unit_env, owner)
        delete = await unit_env.get(DeleteGroupUseCase)
        get_group = await unit_env.get(GetGroupUseCase)
        list_groups = await unit_env.get(ListGroupsUseCase)

        await delete.execute(DeleteGroupRequest(group_id=group.id, user_id=str(owner.id)))

        with pytest.raises(NotFoundError):
            await get_group.execute(
                GetGroupRequest(group_id=group.id, user_id=str(owner.id))
            )
        listed = await list_groups.execute(ListGroupsRequest())
        assert listed.groups == []
