# tests/test_mechanism.py
from __future__ import annotations

from capture_bridge.schemas import CaptureEvent, StackTrace
from capture_bridge.services.capture import tag_mechanism


def test_mechanism_shape():
    event = CaptureEvent(exception={"values": [{"type": "Error", "value": "x"}]})
    stacktrace = StackTrace(mode="stacktrace", mechanism="generic")

    tagged = tag_mechanism(event, stacktrace)

    assert tagged.exception["mechanism"] == {
        "data": {"mode": "stacktrace"},
        "handled": False,
        "type": "generic",
    }


def test_existing_exception_fields_are_kept():
    values = [{"type": "TypeError", "value": "boom"}]
    event = CaptureEvent(
        message="kept",
        exception={"values": values, "custom": 1, "mechanism": {"type": "old", "handled": True}},
    )

    tagged = tag_mechanism(event, StackTrace(mode="stack", mechanism="threading"))

    assert tagged.exception["values"] == values
    assert tagged.exception["custom"] == 1
    assert tagged.exception["mechanism"]["type"] == "threading"
    assert tagged.exception["mechanism"]["handled"] is False
    assert tagged.message == "kept"


def test_input_event_not_mutated():
    event = CaptureEvent(exception={"values": []})

    tag_mechanism(event, StackTrace(mode="failed"))

    assert "mechanism" not in event.exception


def test_event_without_exception():
    tagged = tag_mechanism(CaptureEvent(), StackTrace(mode=None, mechanism="generic"))

    assert tagged.exception == {"mechanism": {"data": {"mode": None}, "handled": False, "type": "generic"}}
