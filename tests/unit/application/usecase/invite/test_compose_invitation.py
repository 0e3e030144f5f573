"""Tests for compose invitation use case."""

import pytest

from invitelink.application.usecase.invite import (
    ComposeInvitationRequest,
    ComposeInvitationUseCase,
    ParseInvitationRequest,
    ParseInvitationUseCase,
)
from invitelink.domain.model import CommunitySnapshot, LongLivedInvite, PeerTelemetry
from invitelink.domain.value import InvitationDataVersion
from tests.conftest import (
    COMMUNITY_NAME,
    OWNER_ORBIT_DB_IDENTITY,
    SEED,
    VALID_PSK,
    make_address,
    make_pair,
    make_peer_id,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def make_community(**overrides) -> CommunitySnapshot:
    """Helper building a community with four peers, the first being local."""
    values = {
        "name": COMMUNITY_NAME,
        "psk": VALID_PSK,
        "owner_orbit_db_identity": OWNER_ORBIT_DB_IDENTITY,
        "peer_list": [make_address(n) for n in range(1, 5)],
        "local_peer_address": make_address(1),
    }
    values.update(overrides)
    return CommunitySnapshot(**values)


class TestComposeInvitationUseCase:
    """Tests for ComposeInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_compose_v1(self, unit_env):
        """Test composing a v1 link from a ready community."""
        # Arrange
        use_case = await unit_env.get(ComposeInvitationUseCase)
        parse_use_case = await unit_env.get(ParseInvitationUseCase)
        stats = [PeerTelemetry(peer_id=make_peer_id(4), last_seen=100)]

        # Act
        response = await use_case.execute(
            ComposeInvitationRequest(community=make_community(), stats=stats)
        )

        # Assert
        assert response.ready is True
        assert response.url.startswith("https://tryquiet.org/join#")
        parsed = await parse_use_case.execute(ParseInvitationRequest(link=response.url))
        assert parsed.version == InvitationDataVersion.v1
        assert parsed.data.pairs == [make_pair(4), make_pair(2), make_pair(3)]

    @pytest.mark.asyncio
    async def test_compose_v2(self, unit_env):
        """Test composing a v2 link when a long-lived invite exists."""
        # Arrange
        use_case = await unit_env.get(ComposeInvitationUseCase)
        parse_use_case = await unit_env.get(ParseInvitationUseCase)
        invite = LongLivedInvite(seed=SEED, id="invite-id")

        # Act
        response = await use_case.execute(
            ComposeInvitationRequest(
                community=make_community(), long_lived_invite=invite
            )
        )

        # Assert
        assert response.ready is True
        parsed = await parse_use_case.execute(ParseInvitationRequest(link=response.url))
        assert parsed.version == InvitationDataVersion.v2
        assert parsed.data.auth_data.community_name == COMMUNITY_NAME
        assert parsed.data.auth_data.seed == SEED
        assert "invite-id" not in response.url

    @pytest.mark.asyncio
    async def test_compose_not_ready(self, unit_env):
        """Test that a community without peers is not ready."""
        # Arrange
        use_case = await unit_env.get(ComposeInvitationUseCase)

        # Act
        response = await use_case.execute(
            ComposeInvitationRequest(
                community=make_community(peer_list=[make_address(1)])
            )
        )

        # Assert
        assert response.ready is False
        assert response.url == ""

    @pytest.mark.asyncio
    async def test_compose_v2_without_invite_not_ready(self, unit_env):
        """Test that requesting v2 without a long-lived invite is not ready."""
        # Arrange
        use_case = await unit_env.get(ComposeInvitationUseCase)

        # Act
        response = await use_case.execute(
            ComposeInvitationRequest(
                community=make_community(), version=InvitationDataVersion.v2
            )
        )

        # Assert
        assert response.ready is False
        assert response.url == ""
