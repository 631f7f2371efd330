"""Capability checks for groups and their content.

Every rule about who may see or change what lives in ``check_access``.
Use cases call ``require_access`` and let ``NotAuthorizedError`` propagate.
"""

from enum import Enum
from typing import Optional, Union

from hub.domain.error import NotAuthorizedError
from hub.domain.model import Discussion, Group, Paper, PaperComment, Reply
from hub.domain.model.common import DomainModel
from hub.domain.value import UserId


class Capability(str, Enum):
    """Things an actor may try to do."""

    VIEW_GROUP = "view_group"
    MANAGE_GROUP = "manage_group"
    CONTRIBUTE = "contribute"
    VIEW_PAPER = "view_paper"
    DELETE_PAPER = "delete_paper"
    EDIT_ITEM = "edit_item"
    DELETE_ITEM = "delete_item"


class AccessDecision(DomainModel):
    """Outcome of a capability check."""

    allowed: bool
    reason: Optional[str] = None


Resource = Union[Group, Paper, PaperComment, Reply, Discussion]

ALLOW = AccessDecision(allowed=True)


def _deny(reason: str) -> AccessDecision:
    return AccessDecision(allowed=False, reason=reason)


def _is_participant(group: Group, actor_id: UserId) -> bool:
    return group.is_owner(actor_id) or group.is_member(actor_id)


def check_access(
    actor_id: Optional[UserId],
    resource: Resource,
    capability: Capability,
    group: Optional[Group] = None,
) -> AccessDecision:
    """Decide whether an actor holds a capability on a resource.

    Args:
        actor_id: Authenticated user, or None for anonymous callers
        resource: Group, paper, or thread item being acted on
        capability: What the actor wants to do
        group: Owning group, required when ``resource`` is not a group

    Returns:
        Decision with a human-readable reason when denied
    """
    if isinstance(resource, Group):
        group = resource
    if group is None:
        raise ValueError(f"Owning group required to check {capability.value}")

    participant = actor_id is not None and _is_participant(group, actor_id)

    if capability == Capability.VIEW_GROUP:
        if group.is_public or participant:
            return ALLOW
        return _deny("Access denied. This is a private group.")

    if capability == Capability.MANAGE_GROUP:
        if actor_id is not None and group.is_owner(actor_id):
            return ALLOW
        return _deny("Only group owner can perform this action")

    if capability == Capability.CONTRIBUTE:
        if participant:
            return ALLOW
        return _deny("Access denied. You must be a member of this group.")

    if capability == Capability.VIEW_PAPER:
        if participant or (isinstance(resource, Paper) and resource.is_public):
            return ALLOW
        return _deny("Access denied. You must be a member of this group.")

    if capability == Capability.DELETE_PAPER:
        if actor_id is not None and (
            (isinstance(resource, Paper) and resource.uploaded_by == actor_id)
            or group.is_owner(actor_id)
        ):
            return ALLOW
        return _deny(
            "Access denied. Only the uploader or group owner can delete this paper."
        )

    if capability == Capability.EDIT_ITEM:
        if actor_id is not None and _author_of(resource) == actor_id:
            return ALLOW
        return _deny("Access denied. You can only edit your own content.")

    if capability == Capability.DELETE_ITEM:
        if actor_id is not None and (
            _author_of(resource) == actor_id or group.is_owner(actor_id)
        ):
            return ALLOW
        return _deny(
            "Access denied. Only the author or group owner can delete this."
        )

    raise ValueError(f"Unknown capability: {capability}")


def _author_of(resource: Resource) -> Optional[UserId]:
    if isinstance(resource, (PaperComment, Reply, Discussion)):
        return resource.author_id
    return None


def require_access(
    actor_id: Optional[UserId],
    resource: Resource,
    capability: Capability,
    group: Optional[Group] = None,
) -> None:
    """Raise unless the actor holds the capability.

    Raises:
        NotAuthorizedError: With the denial reason
    """
    decision = check_access(actor_id, resource, capability, group=group)
    if not decision.allowed:
        raise NotAuthorizedError(decision.reason or "Access denied")
