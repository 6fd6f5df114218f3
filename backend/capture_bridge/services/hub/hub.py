from __future__ import annotations

"""backend/capture_bridge/services/hub/hub.py

Hub: the capture pipeline entry point used by integrations.

This module provides:

- IntegrationRegistry: explicit identifier -> integration mapping
- Hub: capture_event / capture_exception / capture_message
- get_current_hub / bind_hub: the process-wide hub

A hub without a client drops every event; this is the state before
``init()`` runs.
"""

import logging
from typing import Any, Dict, Iterator, Mapping, Protocol, Union

from capture_bridge.schemas import CaptureEvent
from capture_bridge.services.hub.client import Client, Hint
from capture_bridge.services.hub.scope import Scope
from capture_bridge.services.stacktrace.parsers import event_from_exception, event_from_message

logger = logging.getLogger(__name__)


class Integration(Protocol):
    """Minimal interface that integrations must implement."""

    identifier: str
    name: str

    def setup_once(self) -> None:
        """Wire the integration's hooks. Called once per process."""
        ...


class IntegrationRegistry:
    def __init__(self) -> None:
        self._by_id: Dict[str, Integration] = {}

    def register(self, integration: Integration) -> None:
        self._by_id[integration.identifier] = integration

    def get(self, identifier: str) -> Integration | None:
        return self._by_id.get(identifier)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._by_id

    def __iter__(self) -> Iterator[Integration]:
        return iter(list(self._by_id.values()))

    def __len__(self) -> int:
        return len(self._by_id)


EventLike = Union[CaptureEvent, Mapping[str, Any]]


class Hub:
    def __init__(self, client: Client | None = None, registry: IntegrationRegistry | None = None):
        self.client = client
        self.integrations = registry or IntegrationRegistry()
        self.last_event_id: str | None = None

    def get_integration(self, identifier: str) -> Integration | None:
        return self.integrations.get(identifier)

    def capture_event(
        self,
        event: EventLike,
        hint: Hint | None = None,
        scope: Scope | None = None,
    ) -> str | None:
        if self.client is None:
            logger.debug("No client bound; dropping event")
            return None

        if not isinstance(event, CaptureEvent):
            event = CaptureEvent.model_validate(dict(event))

        event_id = self.client.capture_event(event, hint=hint, scope=scope)
        if event_id is not None:
            self.last_event_id = event_id
        return event_id

    def capture_exception(self, error: BaseException, scope: Scope | None = None) -> str | None:
        return self.capture_event(
            event_from_exception(error),
            hint=Hint(original_exception=error),
            scope=scope,
        )

    def capture_message(
        self,
        message: str,
        extra: Mapping[str, Any] | None = None,
        level: str = "info",
        scope: Scope | None = None,
    ) -> str | None:
        return self.capture_event(event_from_message(message, extra, level), scope=scope)


_current_hub = Hub()


def get_current_hub() -> Hub:
    return _current_hub


def bind_hub(hub: Hub) -> Hub:
    """Make ``hub`` the process-wide hub and return the previous one."""
    global _current_hub
    previous = _current_hub
    _current_hub = hub
    return previous


def capture_event(event: EventLike, hint: Hint | None = None, scope: Scope | None = None) -> str | None:
    return get_current_hub().capture_event(event, hint=hint, scope=scope)


def capture_exception(error: BaseException, scope: Scope | None = None) -> str | None:
    return get_current_hub().capture_exception(error, scope=scope)


def capture_message(message: str, extra: Mapping[str, Any] | None = None, level: str = "info") -> str | None:
    return get_current_hub().capture_message(message, extra=extra, level=level)
