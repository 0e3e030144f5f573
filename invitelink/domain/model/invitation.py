"""Invitation payloads.

An invitation payload is everything a new device needs to bootstrap into a
community: a handful of peers to dial, the pre-shared key of the transport,
the owner's OrbitDB identity and, since v2, the data for the long-lived
invite join flow.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from invitelink.domain.model.common import DomainModel
from invitelink.domain.value import (
    InvitationDataVersion,
    OnionAddress,
    PeerId,
    ValueObject,
)


class InvitationPair(ValueObject):
    """Bootstrap peer advertised in a link."""

    peer_id: PeerId
    onion_address: OnionAddress


class InvitationAuthData(ValueObject):
    """Long-lived invite data carried by v2 links."""

    community_name: str
    seed: str  # Opaque signature-chain invitation seed


class InvitationDataV1(DomainModel):
    """v1 invitation payload."""

    version: Literal[InvitationDataVersion.v1] = InvitationDataVersion.v1
    pairs: list[InvitationPair]
    psk: str
    owner_orbit_db_identity: str


class InvitationDataV2(DomainModel):
    """v2 invitation payload."""

    version: Literal[InvitationDataVersion.v2] = InvitationDataVersion.v2
    pairs: list[InvitationPair]
    psk: str
    owner_orbit_db_identity: str
    auth_data: InvitationAuthData


InvitationData = Annotated[
    Union[InvitationDataV1, InvitationDataV2], Field(discriminator="version")
]


class DroppedParam(ValueObject):
    """A URL parameter the decoder discarded instead of failing."""

    key: str
    value: str | None
    reason: str


class DecodeDiagnostics(DomainModel):
    """What the decoder tolerated while reading a link.

    Optional fields that failed validation and malformed peer pairs are
    dropped rather than rejecting the whole link. They are listed here so
    callers can tell a clean link from a degraded one.
    """

    dropped_fields: list[DroppedParam] = Field(default_factory=list)
    dropped_pairs: list[DroppedParam] = Field(default_factory=list)

    @property
    def degraded(self) -> bool:
        """True if anything was dropped."""
        return bool(self.dropped_fields or self.dropped_pairs)


class DecodeResult(DomainModel):
    """Decoded invitation plus decode diagnostics."""

    data: InvitationData
    diagnostics: DecodeDiagnostics = Field(default_factory=DecodeDiagnostics)
