"""Invitation link domain service."""

from functools import partial
from urllib.parse import urlsplit

import logfire

from invitelink.config import LinkSettings
from invitelink.domain.error import InvalidUrlError
from invitelink.domain.link import (
    build_schemas,
    compose_invitation_deep_url,
    compose_invitation_share_url,
    is_psk_code_valid,
    p2p_addresses_to_pairs,
    pairs_to_p2p_addresses,
    parse_and_validate_url_params,
)
from invitelink.domain.link.const import AUTH_DATA_KEY, PSK_PARAM_KEY
from invitelink.domain.link.decoder import query_params
from invitelink.domain.link.validator import PskPredicate
from invitelink.domain.model import (
    CommunitySnapshot,
    DecodeResult,
    InvitationAuthData,
    InvitationData,
    InvitationDataV1,
    InvitationDataV2,
    LongLivedInvite,
    PeerTelemetry,
)
from invitelink.domain.value import InvitationDataVersion, P2PAddress

from .base import Service
from .peer_ranking_service import PeerRankingService


class InvitationLinkService(Service):
    """Domain service for composing and parsing invitation links."""

    def __init__(
        self,
        link_settings: LinkSettings,
        peer_ranking_service: PeerRankingService,
        is_psk_valid: PskPredicate | None = None,
    ) -> None:
        """Initialize invitation link service.

        Args:
            link_settings: Invitation link settings
            peer_ranking_service: Peer ranking service
            is_psk_valid: PSK validity predicate, defaults to a base64 check
                against the configured key length
        """
        self.link_settings = link_settings
        self.peer_ranking_service = peer_ranking_service
        self.schemas = build_schemas(
            is_psk_valid
            or partial(is_psk_code_valid, length=link_settings.psk_length)
        )

    def detect_version(self, url: str) -> InvitationDataVersion:
        """Tell which schema a link was written with.

        Raises:
            InvalidUrlError: If the link carries no PSK
        """
        keys = {key for key, _ in query_params(url)}
        if PSK_PARAM_KEY not in keys:
            raise InvalidUrlError(
                url, "Invitation link does not match either v1 or v2 format"
            )
        if AUTH_DATA_KEY in keys:
            return InvitationDataVersion.v2
        return InvitationDataVersion.v1

    def _parse(self, url: str, original: str) -> DecodeResult:
        try:
            scheme = urlsplit(url).scheme
        except ValueError as e:
            logfire.error("Could not parse invitation url", url=original, error=str(e))
            raise InvalidUrlError(original) from e
        if scheme != self.link_settings.deep_url_scheme:
            logfire.error("Unexpected invitation url scheme", url=original, scheme=scheme)
            raise InvalidUrlError(original)

        version = self.detect_version(url)
        result = parse_and_validate_url_params(
            url,
            self.schemas[version],
            max_depth=self.link_settings.max_nesting_depth,
        )
        logfire.info(
            "Invitation data parsed",
            version=version.value,
            pairs=len(result.data.pairs),
            degraded=result.diagnostics.degraded,
        )
        return result

    def parse_deep_url(self, url: str) -> DecodeResult:
        """Parse a deep URL, e.g. quiet://?<peer id>=<onion>&k=<psk>&o=<owner>

        Raises:
            InvitationLinkError: If the link is invalid
        """
        with logfire.span("invitation_link_service.parse_deep_url"):
            return self._parse(url, url)

    def parse_link(self, link: str) -> DecodeResult:
        """Parse a pasted link.

        Accepts a deep URL, a share URL (payload in the fragment) or a bare
        code such as <peer id>=<onion>&k=<psk>&o=<owner>.

        Raises:
            InvitationLinkError: If the link is invalid
        """
        with logfire.span("invitation_link_service.parse_link"):
            link = link.strip()
            if link.startswith(self.link_settings.deep_url_prefix):
                return self._parse(link, link)
            code = link.split("#", 1)[1] if "#" in link else link
            return self._parse(f"{self.link_settings.deep_url_prefix}?{code}", link)

    def argv_invitation_link(self, argv: list[str]) -> InvitationData | None:
        """Extract invitation data from command line arguments.

        Arguments that are not deep URLs are skipped; the last deep URL wins.

        Raises:
            InvitationLinkError: If a deep URL argument is invalid
        """
        with logfire.span("invitation_link_service.argv_invitation_link"):
            invitation_data: InvitationData | None = None
            for arg in argv:
                if not arg.startswith(self.link_settings.deep_url_prefix):
                    logfire.warn("Not a deep url, not parsing", arg=arg)
                    continue
                logfire.info("Parsing deep url", arg=arg)
                invitation_data = self._parse(arg, arg).data
            return invitation_data

    def bootstrap_addresses(self, data: InvitationData) -> list[P2PAddress]:
        """Rebuild dialable libp2p addresses from the pairs of a parsed link."""
        return pairs_to_p2p_addresses(data.pairs, port=self.link_settings.libp2p_port)

    def compose_deep_url(self, data: InvitationData) -> str:
        """Compose a deep URL for the payload."""
        return compose_invitation_deep_url(data, self.link_settings.deep_url_prefix)

    def compose_share_url(self, data: InvitationData) -> str:
        """Compose a shareable link for the payload."""
        return compose_invitation_share_url(data, self.link_settings.join_page)

    def invitation_url(
        self,
        community: CommunitySnapshot,
        stats: list[PeerTelemetry],
        long_lived_invite: LongLivedInvite | None = None,
        version: InvitationDataVersion | None = None,
    ) -> str:
        """Compose the share link advertising the best ranked peers.

        Version defaults to v2 when a long-lived invite is available.

        Args:
            community: Community state snapshot
            stats: Peer telemetry snapshot
            long_lived_invite: Long-lived invite, required for v2
            version: Link version to compose

        Returns:
            Share URL, or an empty string while the community is not ready
            to invite anyone
        """
        if version is None:
            version = (
                InvitationDataVersion.v2
                if long_lived_invite is not None
                else InvitationDataVersion.v1
            )

        with logfire.span("invitation_link_service.invitation_url", version=version.value):
            peers = self.peer_ranking_service.rank(
                community.peer_list, stats, community.local_peer_address
            )
            if not peers or not community.psk or not community.owner_orbit_db_identity:
                logfire.info(
                    "Community not ready for invitations",
                    peers=len(peers),
                    has_psk=bool(community.psk),
                    has_owner_identity=bool(community.owner_orbit_db_identity),
                )
                return ""

            pairs = p2p_addresses_to_pairs(
                peers[: self.link_settings.max_invitation_peers]
            )
            if not pairs:
                logfire.info("No valid peers to advertise")
                return ""

            data: InvitationData
            if version == InvitationDataVersion.v2:
                if (
                    long_lived_invite is None
                    or not long_lived_invite.seed
                    or not community.name
                ):
                    logfire.info(
                        "Long-lived invite data not ready",
                        has_seed=long_lived_invite is not None,
                        has_community_name=bool(community.name),
                    )
                    return ""
                data = InvitationDataV2(
                    pairs=pairs,
                    psk=community.psk,
                    owner_orbit_db_identity=community.owner_orbit_db_identity,
                    auth_data=InvitationAuthData(
                        community_name=community.name, seed=long_lived_invite.seed
                    ),
                )
            else:
                data = InvitationDataV1(
                    pairs=pairs,
                    psk=community.psk,
                    owner_orbit_db_identity=community.owner_orbit_db_identity,
                )

            url = self.compose_share_url(data)
            logfire.info("Invitation url composed", version=version.value, pairs=len(pairs))
            return url
