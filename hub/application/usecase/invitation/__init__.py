"""Invitation use cases."""

from .accept_invitation import AcceptInvitationRequest, AcceptInvitationUseCase
from .list_invitations import ListInvitationsRequest, ListInvitationsUseCase
from .send_invitation import SendInvitationRequest, SendInvitationUseCase

__all__ = [
    "AcceptInvitationRequest",
    "AcceptInvitationUseCase",
    "ListInvitationsRequest",
    "ListInvitationsUseCase",
    "SendInvitationRequest",
    "SendInvitationUseCase",
]
