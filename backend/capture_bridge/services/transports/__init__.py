from __future__ import annotations

"""backend/capture_bridge/services/transports/__init__.py

Transport registry.

This module exposes a single convenience helper `get_transport` that
constructs the transport named by ``settings.transport``:

- memory (events kept in-process)
- logging (events written to the log)
- celery (events queued for the delivery worker)
"""

from typing import Callable, Dict

from capture_bridge.config import Settings, get_settings
from capture_bridge.services.transports.base import InMemoryTransport, LoggingTransport, Transport
from capture_bridge.services.transports.celery_transport import CeleryTransport

_FACTORIES: Dict[str, Callable[[], Transport]] = {
    InMemoryTransport.name: InMemoryTransport,
    LoggingTransport.name: LoggingTransport,
    CeleryTransport.name: CeleryTransport,
}


def get_transport(settings: Settings | None = None) -> Transport:
    settings = settings or get_settings()
    factory = _FACTORIES.get(settings.transport)
    if factory is None:
        raise ValueError(f"Unknown transport {settings.transport!r}")
    return factory()


__all__ = [
    "CeleryTransport",
    "InMemoryTransport",
    "LoggingTransport",
    "Transport",
    "get_transport",
]
