"""Community state consumed when composing a link."""

from pydantic import Field

from invitelink.domain.model.common import DomainModel
from invitelink.domain.value import P2PAddress, ValueObject


class LongLivedInvite(ValueObject):
    """Reusable signature-chain invite.

    The seed is embedded in v2 links; the id is only used by the
    signature chain and never leaves the device.
    """

    seed: str
    id: str


class CommunitySnapshot(DomainModel):
    """Plain values supplied by the community/identity store.

    Any field may still be missing while the community is being set up;
    composing a link from an incomplete snapshot yields an empty string.
    """

    name: str | None = None
    psk: str | None = None
    owner_orbit_db_identity: str | None = None
    peer_list: list[P2PAddress] = Field(default_factory=list)
    local_peer_address: P2PAddress | None = None
