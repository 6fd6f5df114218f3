"""Build CaptureEvent records from stack traces, exceptions and messages."""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from capture_bridge.schemas import CaptureEvent, StackTrace
from capture_bridge.services.stacktrace.tracekit import compute_stack_trace


def _exception_value(
    error_type: Optional[str],
    value: Optional[str],
    stacktrace: Dict[str, Any] | None,
) -> Dict[str, Any]:
    entry: Dict[str, Any] = {"type": error_type, "value": value}
    if stacktrace:
        entry["stacktrace"] = stacktrace
    return entry


def event_from_stacktrace(stacktrace: StackTrace) -> CaptureEvent:
    frames = [frame.model_dump() for frame in stacktrace.frames]
    return CaptureEvent(
        exception={
            "values": [
                _exception_value(
                    stacktrace.name,
                    stacktrace.message,
                    {"frames": frames} if frames else None,
                )
            ]
        },
    )


def event_from_exception(error: BaseException) -> CaptureEvent:
    """Exception-shaped event for ``error``.

    Errors synthesized from hook text (anything with ``name``/``message``/
    ``stack`` string attributes) keep their raw stack text; real
    exceptions get frames from their traceback.
    """
    name = getattr(error, "name", None)
    message = getattr(error, "message", None)
    stack = getattr(error, "stack", None)
    if isinstance(name, str) and isinstance(stack, str):
        return CaptureEvent(
            exception={
                "values": [
                    _exception_value(
                        name,
                        message if isinstance(message, str) else str(error),
                        {"raw": stack} if stack else None,
                    )
                ]
            },
        )
    return event_from_stacktrace(compute_stack_trace(error))


def event_from_message(message: str, extra: Mapping[str, Any] | None = None, level: str = "info") -> CaptureEvent:
    return CaptureEvent(message=message, extra=dict(extra or {}), level=level)
