"""Versioned invitation link schemas.

A schema is data: an ordered tuple of field specs, each holding the URL
key, the validator to run, an optional processor and an optional nested
schema. The decoder and encoder interpret these records and never look at
a key directly, so a new link version is a new schema object.
"""

from dataclasses import dataclass
from typing import Optional

from invitelink.domain.link.const import (
    AUTH_DATA_KEY,
    AUTH_DATA_OBJECT_KEY,
    COMMUNITY_NAME_KEY,
    INVITATION_SEED_KEY,
    OWNER_ORBIT_DB_IDENTITY_PARAM_KEY,
    PSK_PARAM_KEY,
)
from invitelink.domain.link.validator import (
    ProcessorFun,
    PskPredicate,
    ValidatorFun,
    decode_auth_data,
    encode_base64url,
    is_psk_code_valid,
    make_psk_validator,
    validate_auth_data,
    validate_community_name,
    validate_invitation_seed,
    validate_owner_orbit_db_identity,
)
from invitelink.domain.value import InvitationDataVersion


@dataclass(frozen=True)
class NestedSpec:
    """Child schema expanded from a field's processed value."""

    wrapper_key: str  # Payload key the child fragment is merged under
    fields: tuple["FieldSpec", ...]


@dataclass(frozen=True)
class FieldSpec:
    """Specification of one named URL param."""

    key: str
    attribute: str  # Payload attribute the encoder reads the value from
    validator: ValidatorFun
    required: bool = True
    processor: Optional[ProcessorFun] = None
    encoder: Optional[ProcessorFun] = None  # Inverse of processor
    nested: Optional[NestedSpec] = None


@dataclass(frozen=True)
class VersionedSchema:
    """Ordered field specs of one link version."""

    version: InvitationDataVersion
    fields: tuple[FieldSpec, ...]


AUTH_DATA_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec(
        key=COMMUNITY_NAME_KEY,
        attribute="community_name",
        validator=validate_community_name,
    ),
    FieldSpec(
        key=INVITATION_SEED_KEY,
        attribute="seed",
        validator=validate_invitation_seed,
    ),
)


def build_schemas(
    is_psk_valid: PskPredicate = is_psk_code_valid,
) -> dict[InvitationDataVersion, VersionedSchema]:
    """Build the schema registry around a PSK validity predicate.

    Args:
        is_psk_valid: Opaque predicate deciding whether a PSK is well formed

    Returns:
        Schemas keyed by link version
    """
    common = (
        FieldSpec(
            key=PSK_PARAM_KEY,
            attribute="psk",
            validator=make_psk_validator(is_psk_valid),
        ),
        FieldSpec(
            key=OWNER_ORBIT_DB_IDENTITY_PARAM_KEY,
            attribute="owner_orbit_db_identity",
            validator=validate_owner_orbit_db_identity,
        ),
    )
    v1 = VersionedSchema(version=InvitationDataVersion.v1, fields=common)
    v2 = VersionedSchema(
        version=InvitationDataVersion.v2,
        fields=common
        + (
            FieldSpec(
                key=AUTH_DATA_KEY,
                attribute=AUTH_DATA_OBJECT_KEY,
                validator=validate_auth_data,
                processor=decode_auth_data,
                encoder=encode_base64url,
                nested=NestedSpec(
                    wrapper_key=AUTH_DATA_OBJECT_KEY, fields=AUTH_DATA_FIELDS
                ),
            ),
        ),
    )
    return {v1.version: v1, v2.version: v2}


SCHEMAS = build_schemas()

# Schema for v1 links: <pairs>&k=<psk>&o=<owner identity>
PARAM_CONFIG_V1 = SCHEMAS[InvitationDataVersion.v1]

# Schema for v2 links: v1 plus a=<base64url of c=<community name>&s=<seed>>
PARAM_CONFIG_V2 = SCHEMAS[InvitationDataVersion.v2]
