"""Test configuration and fixtures."""

import logfire
import pytest

from invitelink.domain.link import create_libp2p_address
from invitelink.domain.model import (
    InvitationAuthData,
    InvitationDataV1,
    InvitationDataV2,
    InvitationPair,
)
from invitelink.domain.value import OnionAddress, P2PAddress, PeerId

# Keep test runs local and quiet
logfire.configure(send_to_logfire=False, console=False)

VALID_PSK = "BNlxfE2WBF7LrlpIX0CvECN5o1oZtA16PkAb7GYiwYw="
OWNER_ORBIT_DB_IDENTITY = (
    "018f9e87541d0b61cb4565af8df9699f658116afc54ae6790c31bbf6df3fc343b0"
)
COMMUNITY_NAME = "community-name"
SEED = "4kgd5mwq5z4fmfwq"


def make_peer_id(n: int) -> PeerId:
    """Helper generating a well-formed 46 character peer ID."""
    return PeerId(f"QmPeer{n:040d}")


def make_onion_address(n: int) -> OnionAddress:
    """Helper generating a well-formed 56 character onion address."""
    return OnionAddress(f"onion{n:051d}")


def make_pair(n: int) -> InvitationPair:
    """Helper generating a valid invitation pair."""
    return InvitationPair(peer_id=make_peer_id(n), onion_address=make_onion_address(n))


def make_address(n: int) -> P2PAddress:
    """Helper generating the libp2p address of make_pair(n)."""
    return create_libp2p_address(make_onion_address(n), make_peer_id(n))


@pytest.fixture
def pairs() -> list[InvitationPair]:
    """Two real-world pairs."""
    return [
        InvitationPair(
            peer_id=PeerId("QmZoiJNAvCffeEHBjk766nLuKVdkxkAT7wfFJDPPLsbKSE"),
            onion_address=OnionAddress(
                "y7yczmugl2tekami7sbdz5pfaemvx7bahwthrdvcbzw5vex2crsr26qd"
            ),
        ),
        InvitationPair(
            peer_id=PeerId("QmaRchXhkPWq8iLiMZwFfd2Yi4iESWhAYYJt8cTCVXSwpG"),
            onion_address=OnionAddress(
                "pgzlcstu4ljvma7jqyalimcxlvss5bwlbba3c3iszgtwxee4qjdlgeqd"
            ),
        ),
    ]


@pytest.fixture
def data_v1(pairs) -> InvitationDataV1:
    """Valid v1 invitation payload."""
    return InvitationDataV1(
        pairs=pairs, psk=VALID_PSK, owner_orbit_db_identity=OWNER_ORBIT_DB_IDENTITY
    )


@pytest.fixture
def data_v2(pairs) -> InvitationDataV2:
    """Valid v2 invitation payload."""
    return InvitationDataV2(
        pairs=pairs,
        psk=VALID_PSK,
        owner_orbit_db_identity=OWNER_ORBIT_DB_IDENTITY,
        auth_data=InvitationAuthData(community_name=COMMUNITY_NAME, seed=SEED),
    )
