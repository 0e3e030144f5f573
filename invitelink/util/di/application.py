"""Application layer DI providers."""

from dishka import Scope, provide

from invitelink.application.usecase.invite import (
    ComposeInvitationUseCase,
    ParseInvitationUseCase,
)
from invitelink.domain.service import InvitationLinkService
from invitelink.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    scope = Scope.REQUEST

    @provide
    def get_parse_invitation_use_case(
        self, invitation_link_service: InvitationLinkService
    ) -> ParseInvitationUseCase:
        """Provide parse invitation use case."""
        return ParseInvitationUseCase(invitation_link_service=invitation_link_service)

    @provide
    def get_compose_invitation_use_case(
        self, invitation_link_service: InvitationLinkService
    ) -> ComposeInvitationUseCase:
        """Provide compose invitation use case."""
        return ComposeInvitationUseCase(invitation_link_service=invitation_link_service)
