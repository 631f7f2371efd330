"""Invitation repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hub.domain.model import Invitation
from hub.domain.value import Email, GroupId, InvitationId, InvitationToken


class InvitationRepository(ABC):
    """Repository for Invitation entity."""

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its emailed token.

        Args:
            token: Invitation token

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending(self, email: Email, group_id: GroupId) -> Optional[Invitation]:
        """Find a pending, unexpired invitation for an email and group.

        Args:
            email: Invited email
            group_id: Target group

        Returns:
            The invitation if one is still open
        """
        pass

    @abstractmethod
    async def find_pending_by_group(self, group_id: GroupId) -> list[Invitation]:
        """List pending, unexpired invitations for a group, newest first.

        Args:
            group_id: Target group

        Returns:
            List of invitations
        """
        pass

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Args:
            invitation: The invitation to save

        Returns:
            The saved invitation
        """
        pass

    @abstractmethod
    async def delete(self, invitation_id: InvitationId) -> None:
        """Delete an invitation.

        Args:
            invitation_id: The invitation ID to delete
        """
        pass
