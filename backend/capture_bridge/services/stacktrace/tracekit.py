from __future__ import annotations

"""backend/capture_bridge/services/stacktrace/tracekit.py

Stack-trace feed.

Subscribers receive a structured StackTrace every time an uncaught
condition is reported:

    subscribe(lambda stacktrace, is_global, error: ...)

Reports come from ``report(exc)`` (called by any hook) and from the
thread hook installed by ``install_global_handlers()``.
"""

import logging
import threading
import traceback
from typing import Any, Callable, List, Optional

from capture_bridge.schemas import StackFrame, StackTrace

logger = logging.getLogger(__name__)

StackTraceHandler = Callable[[StackTrace, bool, Optional[BaseException]], Any]

MODE_STACK = "stack"
MODE_FAILED = "failed"

_handlers: List[StackTraceHandler] = []
_installed = False
_previous_thread_hook: Callable[[Any], Any] | None = None


def subscribe(handler: StackTraceHandler) -> None:
    _handlers.append(handler)


def unsubscribe(handler: StackTraceHandler) -> None:
    try:
        _handlers.remove(handler)
    except ValueError:
        pass


def compute_stack_trace(exc: BaseException, mechanism: str = "generic") -> StackTrace:
    """Build a StackTrace from an exception and its traceback, if any."""
    tb = exc.__traceback__
    frames: list[StackFrame] = []
    if tb is not None:
        for summary in traceback.extract_tb(tb):
            frames.append(
                StackFrame(
                    filename=summary.filename,
                    function=summary.name,
                    lineno=summary.lineno,
                    context_line=summary.line or None,
                )
            )

    return StackTrace(
        name=type(exc).__name__,
        message=str(exc) or None,
        mode=MODE_STACK if frames else MODE_FAILED,
        mechanism=mechanism,
        frames=frames,
        raw="".join(traceback.format_exception(type(exc), exc, tb)),
    )


def _notify(stacktrace: StackTrace, is_global: bool, error: Optional[BaseException]) -> None:
    for handler in list(_handlers):
        try:
            handler(stacktrace, is_global, error)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Stack-trace subscriber failed: %s", exc)


def report(exc: BaseException, mechanism: str = "generic", is_global: bool = False) -> StackTrace:
    """Publish ``exc`` to every subscriber and return its StackTrace."""
    stacktrace = compute_stack_trace(exc, mechanism)
    _notify(stacktrace, is_global, exc)
    return stacktrace


def _thread_excepthook(args: Any) -> None:
    if args.exc_value is not None:
        report(args.exc_value, mechanism="threading", is_global=True)
    if _previous_thread_hook is not None:
        _previous_thread_hook(args)


def install_global_handlers() -> None:
    """Chain the thread exception hook into the feed. Safe to call twice."""
    global _installed, _previous_thread_hook
    if _installed:
        return
    _previous_thread_hook = threading.excepthook
    threading.excepthook = _thread_excepthook
    _installed = True
    logger.debug("Stack-trace feed attached: threading.excepthook")
