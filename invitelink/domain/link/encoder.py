"""Invitation link encoder."""

from typing import Any
from urllib.parse import quote, urlencode

from invitelink.domain.link.const import DEEP_URL_SCHEME_WITH_SEPARATOR, QUIET_JOIN_PAGE
from invitelink.domain.link.schema import AUTH_DATA_FIELDS, SCHEMAS, FieldSpec
from invitelink.domain.link.validator import encode_base64url
from invitelink.domain.model import InvitationAuthData, InvitationData


def _compose_params(source: Any, fields: tuple[FieldSpec, ...]) -> list[tuple[str, str]]:
    params: list[tuple[str, str]] = []
    for spec in fields:
        value = getattr(source, spec.attribute)
        if spec.nested is not None:
            value = urlencode(
                _compose_params(value, spec.nested.fields), quote_via=quote
            )
        if spec.encoder is not None:
            value = spec.encoder(value)
        params.append((spec.key, value))
    return params


def encode_auth_data(auth_data: InvitationAuthData) -> str:
    """Encode auth data as a base64url string.

    {"community_name": "community-name", "seed": "4kgd5mwq5z4fmfwq"}
    => c=community-name&s=4kgd5mwq5z4fmfwq
    => Yz1jb21tdW5pdHktbmFtZSZzPTRrZ2Q1bXdxNXo0Zm1md3E
    """
    return encode_base64url(
        urlencode(_compose_params(auth_data, AUTH_DATA_FIELDS), quote_via=quote)
    )


def compose_invitation_url(base_url: str, data: InvitationData) -> str:
    """Compose an invitation URL.

    Pairs come first, in the order given (already ranked), followed by the
    named params of the payload's schema.

    Args:
        base_url: URL the params are appended to
        data: Invitation payload

    Returns:
        Invitation URL
    """
    schema = SCHEMAS[data.version]
    params = [(pair.peer_id, pair.onion_address) for pair in data.pairs]
    params.extend(_compose_params(data, schema.fields))
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{urlencode(params)}"


def compose_invitation_deep_url(
    data: InvitationData, base_url: str = DEEP_URL_SCHEME_WITH_SEPARATOR
) -> str:
    """Compose a deep URL, e.g. quiet://?<peer id>=<onion>&k=<psk>&o=<owner>"""
    return compose_invitation_url(base_url, data)


def compose_invitation_share_url(
    data: InvitationData, join_page: str = QUIET_JOIN_PAGE
) -> str:
    """Compose a shareable link, e.g. https://tryquiet.org/join#<peer id>=<onion>&k=<psk>

    The payload goes in the fragment so it is never sent to the join page's
    server.
    """
    return compose_invitation_url(join_page, data).replace("?", "#", 1)
