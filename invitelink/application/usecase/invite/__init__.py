"""Invite use cases."""

from invitelink.application.usecase.invite.compose_invitation import (
    ComposeInvitationRequest,
    ComposeInvitationResponse,
    ComposeInvitationUseCase,
)
from invitelink.application.usecase.invite.parse_invitation import (
    ParseInvitationRequest,
    ParseInvitationResponse,
    ParseInvitationUseCase,
)

__all__ = [
    "ComposeInvitationRequest",
    "ComposeInvitationResponse",
    "ComposeInvitationUseCase",
    "ParseInvitationRequest",
    "ParseInvitationResponse",
    "ParseInvitationUseCase",
]
