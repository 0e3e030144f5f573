"""Recursive invitation link decoder.

Named params are validated in schema order, nested params are expanded by
re-running the same algorithm on the processed value, and whatever is left
in the query is read as peer pairs.

Example v2 link:

    quiet://?QmZoiJNAvCffeEHBjk766nLuKVdkxkAT7wfFJDPPLsbKSE=y7yczmugl2tekami7sbdz5pfaemvx7bahwthrdvcbzw5vex2crsr26qd
        &k=BNlxfE2WBF7LrlpIX0CvECN5o1oZtA16PkAb7GYiwYw%3D
        &o=018f9e87541d0b61cb4565af8df9699f658116afc54ae6790c31bbf6df3fc343b0
        &a=Yz1jb21tdW5pdHktbmFtZSZzPTRrZ2Q1bXdxNXo0Zm1md3E

``a`` decodes to ``c=community-name&s=4kgd5mwq5z4fmfwq``.
"""

from urllib.parse import parse_qsl, urlsplit

import logfire
from pydantic import TypeAdapter

from invitelink.domain.error import (
    FormatError,
    MissingRequiredFieldError,
    NestingTooDeepError,
    NoValidPeersError,
)
from invitelink.domain.link.const import MAX_NESTING_DEPTH
from invitelink.domain.link.schema import FieldSpec, VersionedSchema
from invitelink.domain.link.validator import validate_peer_data
from invitelink.domain.model import (
    DecodeDiagnostics,
    DecodeResult,
    DroppedParam,
    InvitationData,
    InvitationPair,
)
from invitelink.domain.value import OnionAddress, PeerId

_invitation_data_adapter: TypeAdapter[InvitationData] = TypeAdapter(InvitationData)

Params = list[tuple[str, str]]


def query_params(url: str) -> Params:
    """Parse the query of a URL into an ordered list of (key, value) pairs.

    Duplicate keys and blank values are kept.
    """
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)


def _first(params: Params, key: str) -> str | None:
    return next((value for name, value in params if name == key), None)


def _parse_and_validate_param(
    spec: FieldSpec,
    key_path: str,
    value: str | None,
    dropped_fields: list[DroppedParam],
):
    if value is None:
        if spec.required:
            raise MissingRequiredFieldError(key_path)
        return None

    try:
        return spec.validator(value, spec.processor)
    except FormatError as e:
        if spec.required:
            raise
        logfire.warn("Dropping invalid optional param", key=key_path, error=str(e))
        dropped_fields.append(DroppedParam(key=key_path, value=value, reason=str(e)))
        return None


def _parse_and_validate_params(
    params: Params,
    fields: tuple[FieldSpec, ...],
    dropped_fields: list[DroppedParam],
    depth: int,
    max_depth: int,
    prefix: str = "",
) -> dict:
    output: dict = {}
    for spec in fields:
        key_path = f"{prefix}{spec.key}"
        value = _parse_and_validate_param(
            spec, key_path, _first(params, spec.key), dropped_fields
        )
        if value is not None and spec.nested is not None:
            if depth >= max_depth:
                raise NestingTooDeepError(key_path, max_depth)
            nested_output = _parse_and_validate_params(
                query_params(value),
                spec.nested.fields,
                dropped_fields,
                depth + 1,
                max_depth,
                prefix=f"{key_path}.",
            )
            value = {spec.nested.wrapper_key: nested_output}
        if value is not None:
            output.update(value)
        # A consumed key can never be read back as a peer pair
        params[:] = [(name, v) for name, v in params if name != spec.key]

    return output


def _validate_peer_pairs(
    url: str, params: Params, dropped_pairs: list[DroppedParam]
) -> list[InvitationPair]:
    pairs: list[InvitationPair] = []
    for peer_id, onion_address in params:
        if not validate_peer_data(peer_id, onion_address):
            dropped_pairs.append(
                DroppedParam(key=peer_id, value=onion_address, reason="Invalid peer data")
            )
            continue
        pairs.append(
            InvitationPair(
                peer_id=PeerId(peer_id), onion_address=OnionAddress(onion_address)
            )
        )

    if not pairs:
        raise NoValidPeersError(url)

    return pairs


def parse_and_validate_url_params(
    url: str,
    schema: VersionedSchema,
    max_depth: int = MAX_NESTING_DEPTH,
) -> DecodeResult:
    """Parse and validate the params of an invitation link URL.

    Args:
        url: Invitation link URL; only its query is read
        schema: Schema of the link version to decode
        max_depth: Maximum nesting depth of sub-payloads

    Returns:
        Decoded payload stamped with the schema's version, with diagnostics

    Raises:
        MissingRequiredFieldError: If a required key is absent
        FormatError: If a required field fails validation
        NestingTooDeepError: If nested payloads exceed max_depth
        NoValidPeersError: If no peer pair survives validation
    """
    params = query_params(url)
    dropped_fields: list[DroppedParam] = []
    dropped_pairs: list[DroppedParam] = []

    output = _parse_and_validate_params(
        params, schema.fields, dropped_fields, depth=0, max_depth=max_depth
    )
    pairs = _validate_peer_pairs(url, params, dropped_pairs)

    data = _invitation_data_adapter.validate_python(
        {**output, "pairs": pairs, "version": schema.version}
    )
    return DecodeResult(
        data=data,
        diagnostics=DecodeDiagnostics(
            dropped_fields=dropped_fields, dropped_pairs=dropped_pairs
        ),
    )
