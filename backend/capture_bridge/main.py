# backend/capture_bridge/main.py
from __future__ import annotations

"""
FastAPI application with the capture bridge wired in.

This module depends on:
- capture_bridge.config.get_settings for configuration
- capture_bridge.sdk.init to bind the hub and install integrations
- FastAPIContext to expose the app's error and 404 hooks
- shutdown_statsig to flush capture metrics when the app stops

Run with ``uvicorn capture_bridge.main:app``.
"""

from fastapi import FastAPI

from capture_bridge.config import Settings, get_settings
from capture_bridge.schemas import GlobalHandlersOptions
from capture_bridge.sdk import init
from capture_bridge.services.integrations import GlobalHandlers
from capture_bridge.services.platforms import FastAPIContext
from capture_bridge.services.statsig_client import shutdown_statsig
from capture_bridge.services.transports import Transport


def create_app(settings: Settings | None = None, transport: Transport | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
    )

    @app.on_event("shutdown")
    def on_shutdown() -> None:
        shutdown_statsig()

    # ---- Healthcheck ----

    @app.get("/health", tags=["health"])
    def health() -> dict:
        return {"status": "ok"}

    # ---- Capture ----

    # Hooks must be wired before Starlette builds its middleware stack.
    init(
        settings=settings,
        transport=transport,
        integrations=[
            GlobalHandlers(
                options=GlobalHandlersOptions.from_settings(settings),
                ctx=FastAPIContext(app),
            )
        ],
    )
    return app


app = create_app()
