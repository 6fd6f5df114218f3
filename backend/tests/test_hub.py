# tests/test_hub.py
from __future__ import annotations

import logging

from capture_bridge.schemas import CaptureEvent
from capture_bridge.sdk import init, setup_integrations
from capture_bridge.services.hub import (
    Client,
    Hub,
    IntegrationRegistry,
    Scope,
    capture_message,
    get_current_hub,
)


class CountingIntegration:
    identifier = "Counting"
    name = "Counting"

    def __init__(self) -> None:
        self.setups = 0

    def setup_once(self) -> None:
        self.setups += 1


class BrokenTransport:
    name = "broken"

    def send(self, event):
        raise ConnectionError("backend down")


def test_hub_without_client_drops_events():
    assert get_current_hub().capture_event({"message": "nobody"}) is None


def test_client_stamps_events(settings, transport):
    hub = init(settings=settings, integrations=[], transport=transport)

    event_id = hub.capture_event({"message": "hi"})

    event = transport.events[0]
    assert event.event_id == event_id == hub.last_event_id
    assert event.timestamp is not None
    assert event.platform == "python"
    assert event.environment == "test"
    assert event.release == "1.2.3"


def test_scope_applies_to_single_capture(settings, transport):
    hub = init(settings=settings, integrations=[], transport=transport)
    scope = Scope()
    scope.set_fingerprint(["TypeError", "boom"])
    scope.set_tag("source", "hook")
    scope.set_extra("attempt", 1)

    hub.capture_event({"message": "scoped", "extra": {"page": "/x"}}, scope=scope)
    hub.capture_event({"message": "unscoped"})

    scoped, unscoped = transport.events
    assert scoped.fingerprint == ["TypeError", "boom"]
    assert scoped.tags == {"source": "hook"}
    assert scoped.extra == {"attempt": 1, "page": "/x"}
    assert unscoped.fingerprint is None
    assert unscoped.tags == {}


def test_event_fingerprint_wins_over_scope():
    scope = Scope(fingerprint=["scope"])
    event = scope.apply_to_event(CaptureEvent(fingerprint=["event"]))

    assert event.fingerprint == ["event"]


def test_transport_failure_is_logged_not_raised(settings, caplog):
    hub = init(settings=settings, integrations=[], transport=BrokenTransport())

    with caplog.at_level(logging.WARNING):
        assert hub.capture_event({"message": "lost"}) is None

    assert "backend down" in caplog.text


def test_before_send_can_drop_and_edit(settings, transport):
    seen_hints = []

    def before_send(event, hint):
        seen_hints.append(hint)
        if event.message == "drop me":
            return None
        return event.model_copy(update={"tags": {"edited": "yes"}})

    hub = init(settings=settings, integrations=[], transport=transport, before_send=before_send)

    assert hub.capture_event({"message": "drop me"}) is None
    hub.capture_exception(RuntimeError("kept"))

    assert len(transport.events) == 1
    assert transport.events[0].tags == {"edited": "yes"}
    assert isinstance(seen_hints[1].original_exception, RuntimeError)


def test_capture_message_helper(settings, transport):
    init(settings=settings, integrations=[], transport=transport)

    capture_message("note", extra={"k": "v"})

    assert transport.events[0].message == "note"
    assert transport.events[0].level == "info"


def test_every_new_integration_instance_is_set_up(settings, transport):
    first = CountingIntegration()
    hub = init(settings=settings, integrations=[first], transport=transport)
    assert hub.get_integration("Counting") is first

    second = CountingIntegration()
    hub2 = Hub(Client(settings=settings, transport=transport))
    setup_integrations(hub2, [second])

    assert first.setups == 1
    assert second.setups == 1
    assert hub2.get_integration("Counting") is second


def test_registry_mapping():
    registry = IntegrationRegistry()
    integration = CountingIntegration()
    registry.register(integration)

    assert "Counting" in registry
    assert registry.get("Counting") is integration
    assert registry.get("Missing") is None
    assert list(registry) == [integration]
    assert len(registry) == 1
