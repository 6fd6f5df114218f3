from __future__ import annotations

"""backend/capture_bridge/services/integrations/__init__.py

Integration registry.

This module exposes a single convenience helper `get_default_integrations`
that constructs the integrations installed when ``init()`` is called
without an explicit list:

- GlobalHandlers (uncaught errors, page-not-found, stack-trace feed)

``init()`` accepts any object implementing the ``Integration`` protocol;
the defaults are wired here in one place.
"""

from typing import List

from capture_bridge.config import Settings, get_settings
from capture_bridge.schemas import GlobalHandlersOptions
from capture_bridge.services.hub import Integration
from capture_bridge.services.integrations.global_handlers import GlobalHandlers, RegistrarState


def get_default_integrations(settings: Settings | None = None) -> List[Integration]:
    settings = settings or get_settings()
    return [
        GlobalHandlers(options=GlobalHandlersOptions.from_settings(settings)),
    ]


__all__ = ["GlobalHandlers", "Integration", "RegistrarState", "get_default_integrations"]
