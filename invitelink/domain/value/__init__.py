"""Domain value objects for invitation links."""

from invitelink.domain.value.common import ValueObject
from invitelink.domain.value.identifiers import OnionAddress, P2PAddress, PeerId
from invitelink.domain.value.types import InvitationDataVersion

__all__ = [
    # Base
    "ValueObject",
    # Identifiers
    "PeerId",
    "OnionAddress",
    "P2PAddress",
    # Types
    "InvitationDataVersion",
]
