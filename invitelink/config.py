"""Application configuration."""

from typing import Literal
from pydantic import BaseModel, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LinkSettings(BaseModel):
    """Invitation link configuration."""

    # Custom URL scheme registered by the desktop and mobile clients
    deep_url_scheme: str = "quiet"

    # Public page that hands the fragment over to an installed client
    join_page: str = "https://tryquiet.org/join"

    # Number of ranked peers embedded in a link
    # Keeps the link short enough to fit in a QR code
    max_invitation_peers: int = 3

    # Maximum depth of nested sub-payloads the decoder will expand
    max_nesting_depth: int = 4

    # Size in bytes of a decoded pre-shared key
    psk_length: int = 32

    # Port used when rebuilding libp2p addresses from invitation pairs
    libp2p_port: int = 443

    @computed_field
    @property
    def deep_url_prefix(self) -> str:
        """Deep URL prefix including the separator, e.g. quiet://"""
        return f"{self.deep_url_scheme}://"


class APISettings(BaseModel):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000

    # Passed to uvicorn, e.g. debug, info, warning
    log_level: str = "info"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        API__PORT=8080
        LINK__DEEP_URL_SCHEME=quiet
        LINK__MAX_INVITATION_PEERS=3
        OBSERVABILITY__LOGFIRE_TOKEN=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows LINK__JOIN_PAGE syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    api: APISettings = APISettings()
    link: LinkSettings = LinkSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
