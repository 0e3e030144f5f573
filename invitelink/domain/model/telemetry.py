"""Peer connection telemetry."""

from invitelink.domain.value import PeerId, ValueObject


class PeerTelemetry(ValueObject):
    """Locally observed connection history with a peer.

    Owned and updated by the networking layer; ranking only ever sees an
    immutable snapshot of it.
    """

    peer_id: PeerId
    last_seen: int  # Epoch seconds of the last connection
    connection_time: int = 0  # Cumulative connection duration in seconds
