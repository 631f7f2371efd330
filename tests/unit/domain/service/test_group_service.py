"""Unit tests for GroupService."""

import pytest

from hub.domain.error import BusinessRuleViolationError, NotFoundError
from hub.domain.service import GroupService, UserService
from hub.domain.value import GroupRole
from tests.conftest import create_group, register_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateGroup:
    """Tests for create_group."""

    @pytest.mark.asyncio
    async def test_owner_is_first_member(self, unit_env):
        """A new group lists its owner as the only member."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        owner = await register_user(user_service)

        group = await create_group(group_service, owner)

        assert group.owner_id == owner.id
        assert [m.user_id for m in group.members] == [owner.id]
        assert group.member_count_text == "1 member"
        assert group.role_of(owner.id) == GroupRole.OWNER

    @pytest.mark.asyncio
    async def test_duplicate_name_rejected(self, unit_env):
        """Active groups have unique names."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        owner = await register_user(user_service)
        await create_group(group_service, owner, name="Neuro Lab")

        with pytest.raises(BusinessRuleViolationError, match="already exists"):
            await create_group(group_service, owner, name="Neuro Lab")

    @pytest.mark.asyncio
    async def test_name_free_after_delete(self, unit_env):
        """A deleted group's name can be reused."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner, name="Neuro Lab")
        await group_service.deactivate(group)

        again = await create_group(group_service, owner, name="Neuro Lab")

        assert again.id != group.id


class TestMembership:
    """Tests for join, leave and remove_member."""

    @pytest.mark.asyncio
    async def test_join_and_leave(self, unit_env):
        """Joining adds the user; leaving removes them."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        owner = await register_user(user_service, email="owner@uni.edu")
        bob = await register_user(user_service, email="bob@uni.edu")
        group = await create_group(group_service, owner)

        joined = await group_service.join(group, bob.id)
        assert joined.is_member(bob.id)
        assert joined.member_count == 2

        left = await group_service.leave(joined, bob.id)
        assert not left.is_member(bob.id)

    @pytest.mark.asyncio
    async def test_join_twice_rejected(self, unit_env):
        """Members cannot join again."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)

        with pytest.raises(BusinessRuleViolationError, match="already a member"):
            await group_service.join(group, owner.id)

    @pytest.mark.asyncio
    async def test_owner_cannot_leave(self, unit_env):
        """The owner must delete the group instead of leaving."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)

        with pytest.raises(BusinessRuleViolationError, match="owner cannot leave"):
            await group_service.leave(group, owner.id)

    @pytest.mark.asyncio
    async def test_owner_cannot_be_removed(self, unit_env):
        """remove_member refuses the owner."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)

        with pytest.raises(BusinessRuleViolationError, match="Cannot remove"):
            await group_service.remove_member(group, owner.id)

    @pytest.mark.asyncio
    async def test_deleted_group_not_found(self, unit_env):
        """Soft-deleted groups are reported missing."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)
        await group_service.deactivate(group)

        with pytest.raises(NotFoundError):
            await group_service.get_group(group.id)


class TestListing:
    """Tests for list_public and list_for_member."""

    @pytest.mark.asyncio
    async def test_public_listing_excludes_private_and_searches(self, unit_env):
        """Only public groups are listed, filtered by text."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        owner = await register_user(user_service)
        await create_group(group_service, owner, name="Neuro Lab")
        await create_group(group_service, owner, name="Secret Lab", is_public=False)
        await create_group(group_service, owner, name="Physics Club")

        groups, total = await group_service.list_public(search="lab")

        assert total == 1
        assert [g.name for g in groups] == ["Neuro Lab"]

    @pytest.mark.asyncio
    async def test_member_listing_includes_private(self, unit_env):
        """A member sees every group they belong to."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        owner = await register_user(user_service)
        await create_group(group_service, owner, name="Neuro Lab")
        await create_group(group_service, owner, name="Secret Lab", is_public=False)

        groups = await group_service.list_for_member(owner.id)

        assert {g.name for g in groups} == {"Neuro Lab", "Secret Lab"}
