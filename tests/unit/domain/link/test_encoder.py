"""Unit tests for the invitation link encoder."""

from urllib.parse import parse_qsl, urlencode, urlsplit

from invitelink.domain.link import (
    compose_invitation_deep_url,
    compose_invitation_share_url,
    compose_invitation_url,
    encode_auth_data,
)
from invitelink.domain.model import InvitationAuthData
from tests.conftest import OWNER_ORBIT_DB_IDENTITY, VALID_PSK


class TestEncodeAuthData:
    """Tests for encode_auth_data."""

    def test_known_value(self):
        """Auth data encodes to base64url of c=<name>&s=<seed>."""
        auth_data = InvitationAuthData(
            community_name="community-name", seed="4kgd5mwq5z4fmfwq"
        )

        assert (
            encode_auth_data(auth_data)
            == "Yz1jb21tdW5pdHktbmFtZSZzPTRrZ2Q1bXdxNXo0Zm1md3E"
        )

    def test_spaces_are_percent_encoded(self):
        """Spaces are written as %20 inside the nested query."""
        auth_data = InvitationAuthData(
            community_name="My community", seed="5ah8uYodiwuwVybT"
        )

        assert (
            encode_auth_data(auth_data)
            == "Yz1NeSUyMGNvbW11bml0eSZzPTVhaDh1WW9kaXd1d1Z5YlQ"
        )


class TestComposeInvitationUrl:
    """Tests for URL composition."""

    def test_deep_url_v1(self, data_v1):
        """Pairs come first, then k and o."""
        expected = "quiet://?" + urlencode(
            [
                (data_v1.pairs[0].peer_id, data_v1.pairs[0].onion_address),
                (data_v1.pairs[1].peer_id, data_v1.pairs[1].onion_address),
                ("k", VALID_PSK),
                ("o", OWNER_ORBIT_DB_IDENTITY),
            ]
        )

        assert compose_invitation_deep_url(data_v1) == expected

    def test_deep_url_v2_appends_auth_data(self, data_v2):
        """v2 links end with the encoded auth data."""
        url = compose_invitation_deep_url(data_v2)
        params = parse_qsl(urlsplit(url).query)

        assert [key for key, _ in params][-3:] == ["k", "o", "a"]
        assert params[-1][1] == encode_auth_data(data_v2.auth_data)

    def test_pairs_are_not_reordered(self, data_v1):
        """The encoder keeps the ranked order it was given."""
        reversed_data = data_v1.model_copy(
            update={"pairs": list(reversed(data_v1.pairs))}
        )
        params = parse_qsl(urlsplit(compose_invitation_deep_url(reversed_data)).query)

        assert [key for key, _ in params][:2] == [
            reversed_data.pairs[0].peer_id,
            reversed_data.pairs[1].peer_id,
        ]

    def test_psk_is_escaped(self, data_v1):
        """Base64 padding in the psk is percent-encoded."""
        url = compose_invitation_deep_url(data_v1)

        assert "k=BNlxfE2WBF7LrlpIX0CvECN5o1oZtA16PkAb7GYiwYw%3D" in url

    def test_share_url_uses_fragment(self, data_v1):
        """Share links carry the payload in the fragment of the join page."""
        share_url = compose_invitation_share_url(data_v1)
        deep_url = compose_invitation_deep_url(data_v1)

        assert share_url.startswith("https://tryquiet.org/join#")
        assert share_url.split("#", 1)[1] == deep_url.split("?", 1)[1]
        assert "?" not in share_url

    def test_base_url_with_query(self, data_v1):
        """Params are appended to an existing query."""
        url = compose_invitation_url("https://example.com/join?ref=1", data_v1)

        assert url.startswith("https://example.com/join?ref=1&")
