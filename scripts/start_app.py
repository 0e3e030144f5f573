#!/usr/bin/env python3
"""Serve the invitation link API.

Logging and Logfire are configured before uvicorn imports the app, so
failures while building the container are reported too.
"""

import sys

import logfire
import uvicorn

from invitelink.config import Settings
from invitelink.util.logging import setup_logging
from invitelink.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Serving invitation link API",
        host=settings.api.host,
        port=settings.api.port,
        deep_url_scheme=settings.link.deep_url_scheme,
    )

    try:
        uvicorn.run(
            "invitelink.interface.api.app:create_app",
            factory=True,
            host=settings.api.host,
            port=settings.api.port,
            log_level=settings.api.log_level,
        )
    except Exception as e:
        logfire.error(
            "Invitation link API failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
