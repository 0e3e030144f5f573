"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("Invitation url composed", version="v2", pairs=3)

    with logfire.span("invitation_link_service.parse_link"):
        ...
"""

import logfire
from fastapi import FastAPI

from invitelink.config import Settings
from invitelink.util.error import ConfigurationError


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Cloud sending is enabled when OBSERVABILITY__SEND_TO_LOGFIRE is set, or
    implicitly when OBSERVABILITY__LOGFIRE_TOKEN is present.

    Args:
        settings: Application settings

    Raises:
        ConfigurationError: If sending is requested without a token
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    if (
        send_to_logfire
        and not settings.observability.logfire_token
        and settings.environment == "production"
    ):
        raise ConfigurationError(
            "OBSERVABILITY__LOGFIRE_TOKEN is required to send telemetry in production"
        )

    config_kwargs = {
        "service_name": "invitelink",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(app)
    logfire.info("FastAPI instrumented")
