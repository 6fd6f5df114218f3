# backend/capture_bridge/services/capture/__init__.py
from __future__ import annotations

"""
Capture core.

This package provides:
- signals.py: RawSignal variants (ErrorSignal, TextSignal, StackSignal)
- normalizer.py: normalize any signal into an error object
- mechanism.py: tag stack-trace events with how they were caught
- gate.py: should_capture, evaluated before any other work
- helpers.py: the suppression policy and the ``wrap`` decorator
"""

from .gate import should_capture  # noqa: F401
from .helpers import ignore_on_error, is_error, should_ignore_on_error, wrap  # noqa: F401
from .mechanism import tag_mechanism  # noqa: F401
from .normalizer import UNKNOWN_ERROR_NAME, CapturedError, normalize  # noqa: F401
from .signals import ErrorSignal, RawSignal, StackSignal, TextSignal, to_signal  # noqa: F401
