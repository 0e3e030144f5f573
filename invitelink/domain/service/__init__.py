"""Domain services."""

from .base import Service
from .invitation_link_service import InvitationLinkService
from .peer_ranking_service import PeerRankingService, filter_and_sort_peers

__all__ = [
    "InvitationLinkService",
    "PeerRankingService",
    "Service",
    "filter_and_sort_peers",
]
