"""Unit tests for libp2p address conversion."""

from invitelink.domain.link import (
    create_libp2p_address,
    p2p_addresses_to_pairs,
    pairs_to_p2p_addresses,
    peer_id_from_address,
)
from invitelink.domain.model import InvitationPair

PEER_ID = "QmZoiJNAvCffeEHBjk766nLuKVdkxkAT7wfFJDPPLsbKSE"
ONION_ADDRESS = "gloao6h5plwjy4tdlze24zzgcxll6upq2ex2fmu2ohhyu4gtys4nrjad"


class TestCreateLibp2pAddress:
    """Tests for create_libp2p_address."""

    def test_format(self):
        """Addresses dial the onion service over websockets."""
        assert (
            create_libp2p_address(ONION_ADDRESS, PEER_ID)
            == f"/dns4/{ONION_ADDRESS}.onion/tcp/443/ws/p2p/{PEER_ID}"
        )

    def test_custom_port(self):
        """The port can be overridden."""
        assert "/tcp/80/" in create_libp2p_address(ONION_ADDRESS, PEER_ID, port=80)


class TestP2pAddressesToPairs:
    """Tests for p2p_addresses_to_pairs."""

    def test_converts_and_skips_invalid(self):
        """Only well-formed addresses become pairs."""
        pair = InvitationPair(peer_id=PEER_ID, onion_address=ONION_ADDRESS)
        peer_list = [
            create_libp2p_address(pair.onion_address, pair.peer_id),
            "invalidAddress",
            create_libp2p_address(
                "somethingElse.onion", "QmZoiJNAvCffeEHBjk766nLuKVdkxkAT7wfFJDPPLsbKSA"
            ),
        ]

        assert p2p_addresses_to_pairs(peer_list) == [pair]

    def test_round_trip(self):
        """Pairs converted to addresses convert back unchanged."""
        pairs = [InvitationPair(peer_id=PEER_ID, onion_address=ONION_ADDRESS)]

        assert p2p_addresses_to_pairs(pairs_to_p2p_addresses(pairs)) == pairs


class TestPeerIdFromAddress:
    """Tests for peer_id_from_address."""

    def test_extracts_peer_id(self):
        """The peer ID is the part after /p2p/."""
        assert peer_id_from_address(create_libp2p_address(ONION_ADDRESS, PEER_ID)) == PEER_ID

    def test_missing_peer_id(self):
        """Addresses without /p2p/ have no peer ID."""
        assert peer_id_from_address("/dns4/abc.onion/tcp/443/ws") is None
