"""Peer ranking domain service."""

import logfire

from invitelink.domain.link.address import peer_id_from_address
from invitelink.domain.model import PeerTelemetry
from invitelink.domain.value import P2PAddress

from .base import Service


def filter_and_sort_peers(
    peers: list[P2PAddress],
    stats: list[PeerTelemetry],
    local_peer_address: P2PAddress | None = None,
    include_local_peer_address: bool = False,
) -> list[P2PAddress]:
    """Order peer addresses by observed connection quality.

    Peers with telemetry come first, most recently seen first, then by
    cumulative connection time. Peers without telemetry follow in their
    original order. Duplicates and the local peer's own address are
    removed; with include_local_peer_address the local address is put
    last instead.

    Args:
        peers: Community peer addresses
        stats: Telemetry snapshot, at most one entry per peer ID
        local_peer_address: This device's own address
        include_local_peer_address: Whether to keep the local address

    Returns:
        Ranked peer addresses
    """
    stats_by_peer = {entry.peer_id: entry for entry in stats}

    candidates: list[P2PAddress] = []
    seen: set[str] = set()
    for address in peers:
        if address in seen or address == local_peer_address:
            continue
        seen.add(address)
        candidates.append(address)

    telemetered: list[tuple[int, P2PAddress, PeerTelemetry]] = []
    untelemetered: list[P2PAddress] = []
    for index, address in enumerate(candidates):
        entry = stats_by_peer.get(peer_id_from_address(address))
        if entry is None:
            untelemetered.append(address)
        else:
            telemetered.append((index, address, entry))

    # Original index is the last key so ties never depend on sort stability
    telemetered.sort(
        key=lambda item: (-item[2].last_seen, -item[2].connection_time, item[0])
    )

    ranked = [address for _, address, _ in telemetered] + untelemetered
    if include_local_peer_address and local_peer_address:
        ranked.append(local_peer_address)
    return ranked


class PeerRankingService(Service):
    """Domain service selecting which peers to advertise."""

    def rank(
        self,
        peers: list[P2PAddress],
        stats: list[PeerTelemetry],
        local_peer_address: P2PAddress | None = None,
    ) -> list[P2PAddress]:
        """Rank community peers, excluding the local peer.

        Args:
            peers: Community peer addresses
            stats: Telemetry snapshot taken by the caller
            local_peer_address: This device's own address

        Returns:
            Ranked peer addresses
        """
        with logfire.span(
            "peer_ranking_service.rank", peers=len(peers), stats=len(stats)
        ):
            ranked = filter_and_sort_peers(peers, stats, local_peer_address)
            logfire.info("Peers ranked", ranked=len(ranked))
            return ranked
