"""Domain value types for invitation links."""

from enum import Enum


class InvitationDataVersion(str, Enum):
    """Version of the invitation link schema.

    v1 links carry bootstrap peers, the pre-shared key and the owner's
    OrbitDB identity. v2 links add nested auth data (community name and
    long-lived invite seed).
    """

    v1 = "v1"
    v2 = "v2"
