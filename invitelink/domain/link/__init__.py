"""Invitation link codec: field validators, schemas, encoder and decoder."""

from invitelink.domain.link.address import (
    create_libp2p_address,
    p2p_addresses_to_pairs,
    pairs_to_p2p_addresses,
    peer_id_from_address,
)
from invitelink.domain.link.decoder import parse_and_validate_url_params
from invitelink.domain.link.encoder import (
    compose_invitation_deep_url,
    compose_invitation_share_url,
    compose_invitation_url,
    encode_auth_data,
)
from invitelink.domain.link.schema import (
    PARAM_CONFIG_V1,
    PARAM_CONFIG_V2,
    SCHEMAS,
    FieldSpec,
    NestedSpec,
    VersionedSchema,
    build_schemas,
)
from invitelink.domain.link.validator import is_psk_code_valid, validate_peer_data

__all__ = [
    "FieldSpec",
    "NestedSpec",
    "PARAM_CONFIG_V1",
    "PARAM_CONFIG_V2",
    "SCHEMAS",
    "VersionedSchema",
    "build_schemas",
    "compose_invitation_deep_url",
    "compose_invitation_share_url",
    "compose_invitation_url",
    "create_libp2p_address",
    "encode_auth_data",
    "is_psk_code_valid",
    "p2p_addresses_to_pairs",
    "pairs_to_p2p_addresses",
    "parse_and_validate_url_params",
    "peer_id_from_address",
    "validate_peer_data",
]
