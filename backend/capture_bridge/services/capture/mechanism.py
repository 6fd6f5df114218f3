"""Attach capture-mechanism metadata to events from the stack-trace feed."""
from __future__ import annotations

from capture_bridge.schemas import CaptureEvent, Mechanism, MechanismData, StackTrace


def mechanism_for(stacktrace: StackTrace) -> Mechanism:
    return Mechanism(
        data=MechanismData(mode=stacktrace.mode),
        handled=False,
        type=stacktrace.mechanism,
    )


def tag_mechanism(event: CaptureEvent, stacktrace: StackTrace) -> CaptureEvent:
    """Return a copy of ``event`` with ``exception.mechanism`` set.

    Other keys of ``event.exception`` are kept as they are.
    """
    exception = dict(event.exception or {})
    exception["mechanism"] = mechanism_for(stacktrace).model_dump()
    return event.model_copy(update={"exception": exception})
