"""Conversion between libp2p addresses and invitation pairs.

Community peer lists hold full multiaddrs:

    /dns4/<onion address>.onion/tcp/443/ws/p2p/<peer id>

while links only carry the (peer id, onion address) pair.
"""

import logfire

from invitelink.domain.link.const import LIBP2P_PORT
from invitelink.domain.link.validator import validate_peer_data
from invitelink.domain.model import InvitationPair
from invitelink.domain.value import OnionAddress, P2PAddress, PeerId


def create_libp2p_address(
    onion_address: str, peer_id: str, port: int = LIBP2P_PORT
) -> P2PAddress:
    """Build a libp2p websocket address reachable over Tor."""
    return P2PAddress(f"/dns4/{onion_address}.onion/tcp/{port}/ws/p2p/{peer_id}")


def peer_id_from_address(address: str) -> PeerId | None:
    """Extract the peer ID part of a libp2p address."""
    _, separator, peer_id = address.partition("/p2p/")
    if not separator or not peer_id:
        return None
    return PeerId(peer_id)


def onion_address_from_address(address: str) -> OnionAddress | None:
    """Extract the onion address (without .onion) of a libp2p address."""
    _, separator, rest = address.partition("/dns4/")
    host = rest.split("/tcp/")[0]
    if not separator or not host:
        return None
    return OnionAddress(host.removesuffix(".onion"))


def p2p_addresses_to_pairs(addresses: list[str]) -> list[InvitationPair]:
    """Convert peer addresses to invitation pairs.

    Addresses that cannot be split or whose parts are malformed are skipped.
    """
    pairs: list[InvitationPair] = []
    for address in addresses:
        peer_id = peer_id_from_address(address)
        onion_address = onion_address_from_address(address)
        if not peer_id or not onion_address:
            logfire.error("No peerId or address in peer address", address=address)
            continue
        if not validate_peer_data(peer_id, onion_address):
            continue
        pairs.append(InvitationPair(peer_id=peer_id, onion_address=onion_address))
    return pairs


def pairs_to_p2p_addresses(
    pairs: list[InvitationPair], port: int = LIBP2P_PORT
) -> list[P2PAddress]:
    """Convert invitation pairs back to dialable libp2p addresses."""
    return [
        create_libp2p_address(pair.onion_address, pair.peer_id, port)
        for pair in pairs
    ]
