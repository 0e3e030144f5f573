"""Parse invitation use case."""

import logfire
from pydantic import BaseModel, Field

from invitelink.application.usecase.base import BaseUseCase
from invitelink.domain.error import InvitationLinkError
from invitelink.domain.model import DroppedParam, InvitationData
from invitelink.domain.service import InvitationLinkService
from invitelink.domain.value import InvitationDataVersion, P2PAddress

INVALID_INVITATION_LINK_MESSAGE = "Invalid invitation link"


class ParseInvitationRequest(BaseModel):
    """Parse invitation request."""

    link: str


class ParseInvitationResponse(BaseModel):
    """Parse invitation response."""

    valid: bool
    version: InvitationDataVersion | None = None
    data: InvitationData | None = None
    # Addresses the joining device dials to bootstrap
    peer_addresses: list[P2PAddress] = Field(default_factory=list)
    dropped_fields: list[DroppedParam] = Field(default_factory=list)
    dropped_pairs: list[DroppedParam] = Field(default_factory=list)
    message: str | None = None


class ParseInvitationUseCase(BaseUseCase):
    """Use case for validating a pasted or scanned invitation link.

    Invalid links produce a generic message for the user; the structured
    error is only logged.
    """

    def __init__(self, invitation_link_service: InvitationLinkService) -> None:
        """Initialize parse invitation use case.

        Args:
            invitation_link_service: Invitation link domain service
        """
        self.invitation_link_service = invitation_link_service

    async def execute(self, request: ParseInvitationRequest) -> ParseInvitationResponse:
        """Parse an invitation link.

        Args:
            request: Request with the link text

        Returns:
            Decoded invitation data, or valid=False with a generic message
        """
        with logfire.span("parse_invitation.execute"):
            try:
                result = self.invitation_link_service.parse_link(request.link)
            except InvitationLinkError as e:
                logfire.warn(
                    "Invalid invitation link",
                    error=str(e),
                    error_type=type(e).__name__,
                    key=getattr(e, "key", None),
                    value=getattr(e, "value", None),
                )
                return ParseInvitationResponse(
                    valid=False,
                    message=INVALID_INVITATION_LINK_MESSAGE,
                )

            if result.diagnostics.degraded:
                logfire.warn(
                    "Invitation link decoded with dropped params",
                    dropped_fields=[p.key for p in result.diagnostics.dropped_fields],
                    dropped_pairs=len(result.diagnostics.dropped_pairs),
                )

            return ParseInvitationResponse(
                valid=True,
                version=result.data.version,
                data=result.data,
                peer_addresses=self.invitation_link_service.bootstrap_addresses(
                    result.data
                ),
                dropped_fields=result.diagnostics.dropped_fields,
                dropped_pairs=result.diagnostics.dropped_pairs,
                message="Valid invitation link",
            )
