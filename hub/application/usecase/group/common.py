"""Helpers shared by the group use cases."""

from hub.application.usecase.views import GroupView, group_user_ids
from hub.domain.model import Group
from hub.domain.service import UserService
from hub.domain.value import UserId


async def present_groups(
    user_service: UserService, groups: list[Group], actor_id: UserId | None = None
) -> list[GroupView]:
    """Build group views with owner and member profiles loaded in one query."""
    authors = await user_service.get_many(group_user_ids(groups))
    return [GroupView.from_group(group, authors, actor_id) for group in groups]


async def present_group(
    user_service: UserService, group: Group, actor_id: UserId | None = None
) -> GroupView:
    """Build one group view."""
    views = await present_groups(user_service, [group], actor_id)
    return views[0]
