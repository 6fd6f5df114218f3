# backend/capture_bridge/__init__.py
from __future__ import annotations

"""
Global uncaught-error capture bridge.

Call ``init()`` once at startup; uncaught errors, page-not-found
navigations and stack traces reported to the feed are turned into
CaptureEvent records and handed to the configured transport.
"""

from capture_bridge.sdk import init  # noqa: F401
from capture_bridge.services.capture import wrap  # noqa: F401
from capture_bridge.services.hub import (  # noqa: F401
    capture_event,
    capture_exception,
    capture_message,
    get_current_hub,
)
from capture_bridge.services.integrations import GlobalHandlers  # noqa: F401
