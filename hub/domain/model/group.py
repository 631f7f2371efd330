"""Group entity.

A research group is owned by one user and has a member list that always
includes the owner. Groups are soft-deleted through ``is_active``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, computed_field

from hub.domain.model.common import DomainModel, utcnow
from hub.domain.value import GroupId, GroupRole, UserId


class GroupMember(DomainModel):
    """Membership record."""

    user_id: UserId
    joined_at: datetime = Field(default_factory=utcnow)


class Group(DomainModel):
    """Research group."""

    id: GroupId
    name: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1, max_length=500)
    owner_id: UserId
    members: list[GroupMember] = Field(default_factory=list)
    is_public: bool = True
    field_of_study: Optional[str] = Field(default=None, max_length=100)
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @computed_field
    @property
    def member_count(self) -> int:
        """Number of members, owner included."""
        return len(self.members)

    @computed_field
    @property
    def member_count_text(self) -> str:
        """Member count for display."""
        count = self.member_count
        return f"{count} member" if count == 1 else f"{count} members"

    def is_owner(self, user_id: UserId) -> bool:
        """Check whether ``user_id`` owns the group."""
        return self.owner_id == user_id

    def is_member(self, user_id: UserId) -> bool:
        """Check whether ``user_id`` is in the member list."""
        return any(member.user_id == user_id for member in self.members)

    def role_of(self, user_id: Optional[UserId]) -> GroupRole:
        """Relationship of a user to this group."""
        if user_id is not None and self.is_owner(user_id):
            return GroupRole.OWNER
        if user_id is not None and self.is_member(user_id):
            return GroupRole.MEMBER
        return GroupRole.VISITOR

    def add_member(self, user_id: UserId) -> "Group":
        """Return a copy with ``user_id`` added. Adding an existing member is a no-op."""
        if self.is_member(user_id):
            return self
        return self.model_copy(
            update={
                "members": [*self.members, GroupMember(user_id=user_id)],
                "updated_at": utcnow(),
            }
        )

    def remove_member(self, user_id: UserId) -> "Group":
        """Return a copy without ``user_id`` in the member list."""
        return self.model_copy(
            update={
                "members": [m for m in self.members if m.user_id != user_id],
                "updated_at": utcnow(),
            }
        )
