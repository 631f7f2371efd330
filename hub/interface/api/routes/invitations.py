"""Invitation routes (nested under groups)."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from hub.application.usecase.invitation import (
    AcceptInvitationRequest,
    AcceptInvitationUseCase,
    ListInvitationsRequest,
    ListInvitationsUseCase,
    SendInvitationRequest,
    SendInvitationUseCase,
)
from hub.application.usecase.views import GroupView, InvitationView
from hub.domain.service import AuthService
from hub.interface.api.envelope import Envelope

router = APIRouter(prefix="/groups", tags=["invitations"], route_class=DishkaRoute)


class SendInvitationAPIRequest(BaseModel):
    """API request for inviting someone by email."""

    email: str
    message: str | None = Field(default=None, max_length=500)


@router.post(
    "/accept-invitation/{token}",
    response_model=Envelope[GroupView],
)
async def accept_invitation(
    token: str,
    accept_invitation_use_case: FromDishka[AcceptInvitationUseCase],
) -> Envelope[GroupView]:
    """Accept an invitation by its token.

    Public: the token identifies the invitee, whose account must already
    exist.
    """
    group = await accept_invitation_use_case.execute(
        AcceptInvitationRequest(token=token)
    )
    return Envelope(message="Invitation accepted successfully", data=group)


@router.post(
    "/{group_id}/invite",
    response_model=Envelope[InvitationView],
    status_code=status.HTTP_201_CREATED,
)
async def send_invitation(
    group_id: str,
    body: SendInvitationAPIRequest,
    send_invitation_use_case: FromDishka[SendInvitationUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> Envelope[InvitationView]:
    """Invite someone to a group by email (members only)."""
    user = await auth_service.authenticate(authorization)
    invitation = await send_invitation_use_case.execute(
        SendInvitationRequest(
            group_id=group_id,
            user_id=str(user.id),
            email=body.email,
            message=body.message,
        )
    )
    return Envelope(message="Invitation sent successfully", data=invitation)


@router.get("/{group_id}/invitations", response_model=Envelope[list[InvitationView]])
async def list_invitations(
    group_id: str,
    list_invitations_use_case: FromDishka[ListInvitationsUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> Envelope[list[InvitationView]]:
    """Pending invitations for a group (owner only)."""
    user = await auth_service.authenticate(authorization)
    invitations = await list_invitations_use_case.execute(
        ListInvitationsRequest(group_id=group_id, user_id=str(user.id))
    )
    return Envelope(data=invitations)
