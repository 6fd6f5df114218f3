# backend/capture_bridge/services/hub/__init__.py
from __future__ import annotations

"""
Capture pipeline: hub, scope and client.
"""

from .client import Client  # noqa: F401
from .hub import (  # noqa: F401
    Hint,
    Hub,
    Integration,
    IntegrationRegistry,
    bind_hub,
    capture_event,
    capture_exception,
    capture_message,
    get_current_hub,
)
from .scope import Scope  # noqa: F401
