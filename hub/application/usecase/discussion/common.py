"""Helpers shared by the discussion use cases."""

from hub.domain.access import Capability, require_access
from hub.domain.model import Discussion, Group
from hub.domain.service import DiscussionService, GroupService
from hub.domain.value import DiscussionId, UserId, parse_id


async def load_for_member(
    discussion_service: DiscussionService,
    group_service: GroupService,
    discussion_id: str,
    actor_id: UserId,
) -> tuple[Discussion, Group]:
    """Load a discussion and its group, checking the actor is a member.

    Raises:
        NotFoundError: If the discussion or its group does not exist
        NotAuthorizedError: If the actor is not a member of the group
    """
    discussion = await discussion_service.get_discussion(
        DiscussionId(parse_id(discussion_id))
    )
    group = await group_service.get_group(discussion.group_id)
    require_access(actor_id, group, Capability.CONTRIBUTE)
    return discussion, group
