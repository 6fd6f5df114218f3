from __future__ import annotations

"""backend/capture_bridge/sdk.py

``init()``: build the client and hub, bind the hub process-wide and set
up integrations.

Every integration instance handed to ``init()`` is registered on the new
hub and set up; each instance guards its own hooks against a second
setup. Calling ``init()`` again with fresh instances wires their hooks
too, which is what a second application built in the same process needs.
"""

import logging
from typing import Iterable

from capture_bridge.config import Settings, get_settings
from capture_bridge.services.hub import Client, Hub, Integration, bind_hub
from capture_bridge.services.hub.client import BeforeSend
from capture_bridge.services.integrations import get_default_integrations
from capture_bridge.services.stacktrace import install_global_handlers
from capture_bridge.services.transports import Transport

logger = logging.getLogger(__name__)


def setup_integrations(hub: Hub, integrations: Iterable[Integration]) -> None:
    for integration in integrations:
        hub.integrations.register(integration)
        integration.setup_once()
        logger.debug("Integration installed: %s", integration.name)


def init(
    settings: Settings | None = None,
    integrations: Iterable[Integration] | None = None,
    transport: Transport | None = None,
    before_send: BeforeSend | None = None,
) -> Hub:
    settings = settings or get_settings()
    client = Client(settings=settings, transport=transport, before_send=before_send)
    hub = Hub(client)
    bind_hub(hub)

    install_global_handlers()
    setup_integrations(
        hub,
        integrations if integrations is not None else get_default_integrations(settings),
    )
    return hub
