"""Dispatch gate: the first check every captured signal goes through."""
from __future__ import annotations

import logging
from typing import Any

from capture_bridge.services.capture.helpers import should_ignore_on_error, was_captured
from capture_bridge.services.capture.signals import ErrorSignal

logger = logging.getLogger(__name__)


def should_capture(signal: Any = None) -> bool:
    """Return False when the signal must be dropped before any work is done.

    Drops everything while hooks are silenced, and exceptions that were
    already reported through ``wrap``.
    """
    if should_ignore_on_error():
        logger.debug("Global hooks silenced; dropping signal")
        return False

    error = signal.error if isinstance(signal, ErrorSignal) else signal
    if was_captured(error):
        logger.debug("Exception already captured; dropping signal")
        return False

    return True
