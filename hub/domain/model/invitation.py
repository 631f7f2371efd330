"""Invitation entity.

Invitations let group members bring colleagues in by email. The token in
the emailed link is the only credential needed to accept.
"""

from datetime import datetime, timedelta
from typing import Optional

from pydantic import Field, computed_field

from hub.domain.model.common import DomainModel, utcnow
from hub.domain.value import (
    Email,
    GroupId,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)

DEFAULT_EXPIRY_DAYS = 7


def default_expiry() -> datetime:
    """Expiry timestamp for an invitation created now."""
    return utcnow() + timedelta(days=DEFAULT_EXPIRY_DAYS)


class Invitation(DomainModel):
    """Invitation to join a group.

    Business rules:
    - One pending, unexpired invitation per (email, group)
    - Only pending, unexpired invitations can be accepted
    - Accepting records who accepted and when
    """

    id: InvitationId
    group_id: GroupId
    invited_by: UserId
    email: Email
    message: Optional[str] = Field(default=None, max_length=500)
    token: InvitationToken
    status: InvitationStatus = InvitationStatus.PENDING
    expires_at: datetime = Field(default_factory=default_expiry)
    accepted_at: Optional[datetime] = None
    accepted_by: Optional[UserId] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @computed_field
    @property
    def is_expired(self) -> bool:
        """Past its expiry date or explicitly expired."""
        return utcnow() > self.expires_at or self.status == InvitationStatus.EXPIRED

    @property
    def is_acceptable(self) -> bool:
        """Pending and not yet expired."""
        return self.status == InvitationStatus.PENDING and not self.is_expired

    def accept(self, user_id: UserId) -> "Invitation":
        """Return a copy marked accepted by ``user_id``."""
        now = utcnow()
        return self.model_copy(
            update={
                "status": InvitationStatus.ACCEPTED,
                "accepted_at": now,
                "accepted_by": user_id,
                "updated_at": now,
            }
        )

    def expire(self) -> "Invitation":
        """Return a copy marked expired."""
        return self.model_copy(
            update={"status": InvitationStatus.EXPIRED, "updated_at": utcnow()}
        )
