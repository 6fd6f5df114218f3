from __future__ import annotations

"""backend/capture_bridge/services/capture/normalizer.py

Turn any raw signal into an error object with name, message and stack.

Exceptions pass through untouched. Text and stack records become a
CapturedError whose name and message come from the fingerprint
classifier, falling back to UnknownAppError, and whose stack is the raw
text exactly as received.

Normalization never raises: a malformed or empty payload still yields
a CapturedError.
"""

from typing import Any, Optional

from capture_bridge.services.capture.signals import (
    ErrorSignal,
    StackSignal,
    TextSignal,
    to_signal,
)
from capture_bridge.services.diagnostics import classify

UNKNOWN_ERROR_NAME = "UnknownAppError"


class CapturedError(Exception):
    """Error synthesized from a hook payload that carried no exception."""

    def __init__(self, message: str, *, name: str = UNKNOWN_ERROR_NAME, stack: str = "") -> None:
        super().__init__(message)
        self.name = name
        self.message = message
        self.stack = stack

    def __repr__(self) -> str:
        return f"CapturedError(name={self.name!r}, message={self.message!r})"


def _build(error_type: Optional[str], error_message: Optional[str], stack: str) -> CapturedError:
    name = error_type or UNKNOWN_ERROR_NAME
    message = error_message or name
    return CapturedError(message, name=name, stack=stack)


def normalize_text(text: str) -> CapturedError:
    fingerprint = classify(text)
    return _build(fingerprint.error_type, fingerprint.error_message, text)


def normalize(signal: Any) -> BaseException:
    """Return an error object for ``signal``.

    ``signal`` may be a RawSignal variant or any hook payload; payloads
    are wrapped with ``to_signal`` first.
    """
    signal = to_signal(signal)

    if isinstance(signal, ErrorSignal):
        return signal.error

    if isinstance(signal, StackSignal):
        stacktrace = signal.stacktrace
        fingerprint = classify(stacktrace.raw)
        return _build(
            stacktrace.name or fingerprint.error_type,
            stacktrace.message or fingerprint.error_message,
            stacktrace.raw,
        )

    text_signal: TextSignal = signal
    return normalize_text(text_signal.text)
