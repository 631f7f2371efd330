"""In-memory invitation repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from hub.domain.model import Invitation
from hub.domain.repository import InvitationRepository
from hub.domain.value import (
    Email,
    GroupId,
    InvitationId,
    InvitationStatus,
    InvitationToken,
)


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self) -> None:
        self._invitations: list[Invitation] = []

    def _is_open(self, invitation: Invitation) -> bool:
        return invitation.status == InvitationStatus.PENDING and not invitation.is_expired

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        for invitation in self._invitations:
            if invitation.id == invitation_id:
                return invitation
        return None

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its token."""
        for invitation in self._invitations:
            if invitation.token == token:
                return invitation
        return None

    async def find_pending(self, email: Email, group_id: GroupId) -> Optional[Invitation]:
        """Find an open invitation for an email and group."""
        for invitation in self._invitations:
            if (
                invitation.email == email
                and invitation.group_id == group_id
                and self._is_open(invitation)
            ):
                return invitation
        return None

    async def find_pending_by_group(self, group_id: GroupId) -> list[Invitation]:
        """Open invitations for a group, newest first."""
        matches = [
            i for i in self._invitations if i.group_id == group_id and self._is_open(i)
        ]
        matches.sort(key=lambda i: i.created_at, reverse=True)
        return matches

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Raises:
            IntegrityError: If another invitation already has this token
        """
        for i, existing in enumerate(self._invitations):
            if existing.id == invitation.id:
                self._invitations[i] = invitation
                return invitation

        if await self.find_by_token(invitation.token):
            raise IntegrityError("Duplicate invitation token", None, Exception())

        self._invitations.append(invitation)
        return invitation

    async def delete(self, invitation_id: InvitationId) -> None:
        """Delete an invitation."""
        self._invitations = [i for i in self._invitations if i.id != invitation_id]
