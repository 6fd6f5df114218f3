# backend/capture_bridge/services/stacktrace/__init__.py
from __future__ import annotations

"""
Stack-trace feed and event converters.

- tracekit.py: subscribe/report, and the thread hook feeding it
- parsers.py: build CaptureEvent records from stack traces and exceptions
"""

from .parsers import event_from_exception, event_from_message, event_from_stacktrace  # noqa: F401
from .tracekit import compute_stack_trace, install_global_handlers, report, subscribe, unsubscribe  # noqa: F401
