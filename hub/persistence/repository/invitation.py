"""PostgreSQL implementation of Invitation repository."""

from typing import Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hub.domain.model import Invitation
from hub.domain.repository import InvitationRepository
from hub.domain.value import (
    Email,
    GroupId,
    InvitationId,
    InvitationStatus,
    InvitationToken,
)
from hub.persistence.mappers import invitation_to_dict, row_to_invitation
from hub.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its token."""
        stmt = select(invitations_table).where(invitations_table.c.token == token.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_pending(self, email: Email, group_id: GroupId) -> Optional[Invitation]:
        """Find a pending, unexpired invitation for an email and group."""
        stmt = select(invitations_table).where(
            invitations_table.c.email == email.root,
            invitations_table.c.group_id == group_id,
            invitations_table.c.status == InvitationStatus.PENDING.value,
            invitations_table.c.expires_at > func.now(),
        )
        result = await self.session.execute(stmt.limit(1))
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_pending_by_group(self, group_id: GroupId) -> list[Invitation]:
        """Open invitations for a group, newest first."""
        stmt = (
            select(invitations_table)
            .where(
                invitations_table.c.group_id == group_id,
                invitations_table.c.status == InvitationStatus.PENDING.value,
                invitations_table.c.expires_at > func.now(),
            )
            .order_by(invitations_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update)."""
        invitation_dict = invitation_to_dict(invitation)

        existing = await self.find_by_id(invitation.id)
        if existing:
            stmt = (
                update(invitations_table)
                .where(invitations_table.c.id == invitation.id)
                .values(**invitation_dict)
            )
        else:
            stmt = insert(invitations_table).values(**invitation_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return invitation

    async def delete(self, invitation_id: InvitationId) -> None:
        """Delete an invitation."""
        await self.session.execute(
            delete(invitations_table).where(invitations_table.c.id == invitation_id)
        )
        await self.session.flush()
