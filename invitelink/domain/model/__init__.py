"""Domain model entities for invitation links."""

from invitelink.domain.model.community import CommunitySnapshot, LongLivedInvite
from invitelink.domain.model.invitation import (
    DecodeDiagnostics,
    DecodeResult,
    DroppedParam,
    InvitationAuthData,
    InvitationData,
    InvitationDataV1,
    InvitationDataV2,
    InvitationPair,
)
from invitelink.domain.model.telemetry import PeerTelemetry

__all__ = [
    "CommunitySnapshot",
    "DecodeDiagnostics",
    "DecodeResult",
    "DroppedParam",
    "InvitationAuthData",
    "InvitationData",
    "InvitationDataV1",
    "InvitationDataV2",
    "InvitationPair",
    "LongLivedInvite",
    "PeerTelemetry",
]
