"""FastAPI application."""

from fastapi import FastAPI

from invitelink.interface.api.routes import health, invites
from invitelink.util.di.container import create_container, setup_di
from invitelink.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    app_instance = FastAPI(
        title="Invitation Link API",
        description="Compose and validate invitation links for peer-to-peer communities",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(invites.router)

    return app_instance
