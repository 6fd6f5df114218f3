from __future__ import annotations

"""backend/capture_bridge/services/hub/client.py

Client: the last stop before the transport.

Responsibilities:
- stamp event_id, timestamp, platform, environment and release
- apply the scope handed in with the capture
- run the optional before_send callback with the capture hint
- hand the event to the transport, once
- report a capture metric

Transport failures are logged and swallowed; nothing propagates back
into the hook that produced the event.
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from capture_bridge.config import Settings, get_settings
from capture_bridge.schemas import CaptureEvent
from capture_bridge.services.hub.scope import Scope
from capture_bridge.services.statsig_client import log_capture_metric
from capture_bridge.services.transports import Transport, get_transport

logger = logging.getLogger(__name__)

PLATFORM = "python"


@dataclass
class Hint:
    """Original exception and raw data attached to a single capture."""

    original_exception: Optional[BaseException] = None
    data: Dict[str, Any] = field(default_factory=dict)


BeforeSend = Callable[[CaptureEvent, Hint], Optional[CaptureEvent]]


class Client:
    def __init__(
        self,
        settings: Settings | None = None,
        transport: Transport | None = None,
        before_send: BeforeSend | None = None,
    ):
        self.settings = settings or get_settings()
        self.transport = transport or get_transport(self.settings)
        self.before_send = before_send

    def _prepare(self, event: CaptureEvent, scope: Optional[Scope]) -> CaptureEvent:
        update: Dict[str, Any] = {
            "event_id": event.event_id or uuid.uuid4().hex,
            "timestamp": event.timestamp or datetime.now(timezone.utc),
            "platform": event.platform or PLATFORM,
            "environment": event.environment or self.settings.environment,
            "release": event.release or self.settings.release,
        }
        prepared = event.model_copy(update=update)
        if scope is not None:
            prepared = scope.apply_to_event(prepared)
        return prepared

    def capture_event(
        self,
        event: CaptureEvent,
        hint: Hint | None = None,
        scope: Optional[Scope] = None,
    ) -> str | None:
        prepared = self._prepare(event, scope)

        if self.before_send is not None:
            try:
                result = self.before_send(prepared, hint or Hint())
            except Exception as exc:  # noqa: BLE001
                logger.warning("before_send failed for event %s: %s", prepared.event_id, exc)
                result = prepared
            if result is None:
                logger.debug("before_send dropped event %s", prepared.event_id)
                return None
            prepared = result

        try:
            self.transport.send(prepared)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Transport %s failed to send event %s: %s", self.transport.name, prepared.event_id, exc)
            return None

        mechanism = (prepared.exception or {}).get("mechanism") or {}
        log_capture_metric(
            "error_event_captured",
            value=prepared.level,
            metadata={
                "mechanism": str(mechanism.get("type") or "none"),
                "transport": self.transport.name,
            },
        )
        return prepared.event_id
