"""Host platform backed by the interpreter's own uncaught-exception hook."""
from __future__ import annotations

import logging
import sys
from types import TracebackType
from typing import Any, Callable, Optional, Type

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[Any], Any]


class ProcessContext:
    """Exposes ``on_error`` by chaining ``sys.excepthook``.

    A plain process has no navigation, so there is no ``on_page_not_found``.
    """

    name = "process"

    def on_error(self, handler: ErrorHandler) -> None:
        previous = sys.excepthook

        def excepthook(
            exc_type: Type[BaseException],
            exc_value: BaseException,
            tb: Optional[TracebackType],
        ) -> None:
            if not issubclass(exc_type, KeyboardInterrupt):
                try:
                    handler(exc_value)
                except Exception as exc:  # noqa: BLE001
                    logger.warning("Global error handler failed: %s", exc)
            previous(exc_type, exc_value, tb)

        sys.excepthook = excepthook
