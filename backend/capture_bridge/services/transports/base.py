from __future__ import annotations

"""backend/capture_bridge/services/transports/base.py

Transport protocol and the in-process transports.

This module provides:

- Transport: minimal interface every transport implements
- InMemoryTransport: keeps events in a list (tests, local runs)
- LoggingTransport: writes the JSON payload to the log

Delivery guarantees are the transport's concern. The client calls
``send`` once per event and never retries.
"""

import json
import logging
from typing import List, Protocol

from capture_bridge.schemas import CaptureEvent

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Minimal interface that concrete transports must implement."""

    name: str

    def send(self, event: CaptureEvent) -> None:
        ...


class InMemoryTransport:
    name = "memory"

    def __init__(self) -> None:
        self.events: List[CaptureEvent] = []

    def send(self, event: CaptureEvent) -> None:
        self.events.append(event)

    def clear(self) -> None:
        self.events.clear()


class LoggingTransport:
    name = "logging"

    def __init__(self, level: int = logging.ERROR) -> None:
        self.level = level

    def send(self, event: CaptureEvent) -> None:
        payload = event.model_dump(mode="json", exclude_none=True)
        logger.log(self.level, "Captured event %s: %s", event.event_id, json.dumps(payload))
