"""Domain layer DI providers."""

from dishka import Scope, provide

from invitelink.config import LinkSettings
from invitelink.domain.service import InvitationLinkService, PeerRankingService
from invitelink.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are stateless, so one instance serves the whole app.
    """

    scope = Scope.APP

    @provide
    def get_peer_ranking_service(self) -> PeerRankingService:
        """Provide peer ranking domain service."""
        return PeerRankingService()

    @provide
    def get_invitation_link_service(
        self, link_settings: LinkSettings, peer_ranking_service: PeerRankingService
    ) -> InvitationLinkService:
        """Provide invitation link domain service.

        Uses the default PSK check sized by link_settings.psk_length.
        """
        return InvitationLinkService(
            link_settings=link_settings,
            peer_ranking_service=peer_ranking_service,
        )
