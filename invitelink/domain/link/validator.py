"""Field validators for invitation link URL params.

Every validator takes the raw param value and an optional processor, and
either returns the fragment to merge into the decoded payload or raises
UrlParamValidatorError tagged with the offending key. Validators are pure:
the same value always yields the same outcome.
"""

import base64
import binascii
import re
from typing import Any, Callable

import logfire

from invitelink.domain.error import UrlParamValidatorError
from invitelink.domain.link.const import (
    AUTH_DATA_KEY,
    COMMUNITY_NAME_KEY,
    DEEP_URL_SCHEME_WITH_SEPARATOR,
    INVITATION_SEED_KEY,
    PSK_LENGTH,
    PSK_PARAM_KEY,
)

ProcessorFun = Callable[[str], str]
ValidatorFun = Callable[[str, ProcessorFun | None], Any]
PskPredicate = Callable[[str], bool]

ONION_ADDRESS_REGEX = re.compile(r"[a-z0-9]{56}")
PEER_ID_REGEX = re.compile(r"[a-zA-Z0-9]{46}")
INVITATION_SEED_REGEX = re.compile(r"[a-zA-Z0-9]{16}")
COMMUNITY_NAME_REGEX = re.compile(r"[-a-zA-Z0-9 ]+")
AUTH_DATA_REGEX = re.compile(r"[A-Za-z0-9_-]+")


def _process(value: str, processor: ProcessorFun | None) -> str:
    return processor(value) if processor is not None else value


def is_psk_code_valid(psk: str, length: int = PSK_LENGTH) -> bool:
    """Check that a PSK is standard base64 decoding to ``length`` bytes.

    Example: BNlxfE2WBF7LrlpIX0CvECN5o1oZtA16PkAb7GYiwYw=
    """
    try:
        decoded = base64.b64decode(psk.strip(), validate=True)
    except (binascii.Error, ValueError):
        return False
    return len(decoded) == length


def make_psk_validator(is_valid: PskPredicate = is_psk_code_valid) -> ValidatorFun:
    """Build the PSK validator around an opaque validity predicate.

    The PSK bytes are never inspected here, only handed to ``is_valid``.
    """

    def validate_psk(value: str, processor: ProcessorFun | None = None) -> dict:
        if not is_valid(value):
            logfire.warn("PSK is not a valid PSK code")
            raise UrlParamValidatorError(PSK_PARAM_KEY, value)
        return {"psk": _process(value, processor)}

    return validate_psk


validate_psk = make_psk_validator()


def validate_owner_orbit_db_identity(
    value: str, processor: ProcessorFun | None = None
) -> dict:
    """Accept the owner's OrbitDB identity.

    Only presence is checked (by the decoder), the value itself is not
    validated.
    """
    return {"owner_orbit_db_identity": _process(value, processor)}


def validate_auth_data(value: str, processor: ProcessorFun | None = None) -> str:
    """Check that auth data is base64url, then hand it to the processor.

    Returns the processed string rather than a fragment: the decoder
    expands it against the nested schema.
    """
    if AUTH_DATA_REGEX.fullmatch(value) is None:
        logfire.warn("Auth data string is not a valid base64url-encoded string")
        raise UrlParamValidatorError(AUTH_DATA_KEY, value)
    return _process(value, processor)


def validate_community_name(value: str, processor: ProcessorFun | None = None) -> dict:
    """Nested validator for the community name."""
    if COMMUNITY_NAME_REGEX.fullmatch(value) is None:
        logfire.warn("Community name is not valid", community_name=value)
        raise UrlParamValidatorError(f"{AUTH_DATA_KEY}.{COMMUNITY_NAME_KEY}", value)
    return {"community_name": _process(value, processor)}


def validate_invitation_seed(
    value: str, processor: ProcessorFun | None = None
) -> dict:
    """Nested validator for the long-lived invite seed."""
    if INVITATION_SEED_REGEX.fullmatch(value) is None:
        logfire.warn("Invitation seed is not a valid seed", seed=value)
        raise UrlParamValidatorError(f"{AUTH_DATA_KEY}.{INVITATION_SEED_KEY}", value)
    return {"seed": _process(value, processor)}


def validate_peer_data(peer_id: str, onion_address: str) -> bool:
    """Check that a peer ID and onion address are well formed.

    Returns:
        True if both match their format, False otherwise
    """
    if PEER_ID_REGEX.fullmatch(peer_id) is None:
        logfire.warn("PeerId is not valid", peer_id=peer_id)
        return False

    if ONION_ADDRESS_REGEX.fullmatch(onion_address) is None:
        logfire.warn("Onion address is not valid", onion_address=onion_address)
        return False

    return True


def encode_base64url(text: str) -> str:
    """Encode text as unpadded base64url."""
    return base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii").rstrip("=")


def decode_auth_data(value: str) -> str:
    """Decode base64url auth data into a synthetic deep URL.

    Yz1jb21tdW5pdHktbmFtZSZzPTRrZ2Q1bXdxNXo0Zm1md3E
    => quiet://?c=community-name&s=4kgd5mwq5z4fmfwq

    Bytes that are not UTF-8 are replaced, so the nested validators reject
    them instead of the decoder crashing.
    """
    try:
        decoded = base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))
    except (binascii.Error, ValueError):
        logfire.warn("Auth data could not be base64url-decoded")
        raise UrlParamValidatorError(AUTH_DATA_KEY, value)
    return f"{DEEP_URL_SCHEME_WITH_SEPARATOR}?{decoded.decode('utf-8', errors='replace')}"
