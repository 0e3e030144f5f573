"""Compose invitation use case."""

import logfire
from pydantic import BaseModel, Field

from invitelink.application.usecase.base import BaseUseCase
from invitelink.domain.model import CommunitySnapshot, LongLivedInvite, PeerTelemetry
from invitelink.domain.service import InvitationLinkService
from invitelink.domain.value import InvitationDataVersion


class ComposeInvitationRequest(BaseModel):
    """Compose invitation request."""

    community: CommunitySnapshot
    stats: list[PeerTelemetry] = Field(default_factory=list)
    long_lived_invite: LongLivedInvite | None = None
    version: InvitationDataVersion | None = None


class ComposeInvitationResponse(BaseModel):
    """Compose invitation response."""

    url: str
    ready: bool


class ComposeInvitationUseCase(BaseUseCase):
    """Use case for building the link shown in the invite screen and QR code."""

    def __init__(self, invitation_link_service: InvitationLinkService) -> None:
        """Initialize compose invitation use case.

        Args:
            invitation_link_service: Invitation link domain service
        """
        self.invitation_link_service = invitation_link_service

    async def execute(
        self, request: ComposeInvitationRequest
    ) -> ComposeInvitationResponse:
        """Compose an invitation link from a community snapshot.

        Args:
            request: Community state, telemetry snapshot and optional invite

        Returns:
            The share URL; ready is False and url empty while the community
            lacks peers, keys or long-lived invite data
        """
        with logfire.span(
            "compose_invitation.execute",
            version=request.version.value if request.version else None,
        ):
            url = self.invitation_link_service.invitation_url(
                request.community,
                request.stats,
                long_lived_invite=request.long_lived_invite,
                version=request.version,
            )
            return ComposeInvitationResponse(url=url, ready=bool(url))
