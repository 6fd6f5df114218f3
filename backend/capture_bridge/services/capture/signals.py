from __future__ import annotations

"""backend/capture_bridge/services/capture/signals.py

Raw signals delivered by global hooks.

A hook may hand us an exception object, a bare string (message or
stack text) or a structured stack trace from the stack-trace feed.
Each shape gets its own variant so the normalizer handles them
case by case:

- ErrorSignal: an exception object
- TextSignal: raw text, never reformatted
- StackSignal: a StackTrace record
"""

from dataclasses import dataclass
from typing import Any, Union

from capture_bridge.schemas import StackTrace


@dataclass(frozen=True)
class ErrorSignal:
    error: BaseException


@dataclass(frozen=True)
class TextSignal:
    text: str


@dataclass(frozen=True)
class StackSignal:
    stacktrace: StackTrace


RawSignal = Union[ErrorSignal, TextSignal, StackSignal]


def to_signal(value: Any) -> RawSignal:
    """Wrap an arbitrary hook payload in its signal variant."""
    if isinstance(value, (ErrorSignal, TextSignal, StackSignal)):
        return value
    if isinstance(value, BaseException):
        return ErrorSignal(value)
    if isinstance(value, StackTrace):
        return StackSignal(value)
    if value is None:
        return TextSignal("")
    if isinstance(value, str):
        return TextSignal(value)
    try:
        return TextSignal(str(value))
    except Exception:  # noqa: BLE001
        return TextSignal("")
