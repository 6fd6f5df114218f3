from __future__ import annotations

"""backend/capture_bridge/services/integrations/global_handlers.py

GlobalHandlers integration.

Wires three sources of uncaught errors into the capture pipeline:

- the stack-trace feed (always): each StackTrace becomes an
  exception event tagged with its mechanism
- the platform's ``on_error`` hook (when enabled and exposed): the
  payload is classified, normalized and captured as an exception,
  with the classifier's fingerprint on the scope
- the platform's ``on_page_not_found`` hook (when enabled and exposed):
  a plain "page not found" message event carrying the hook's payload

Every path runs the dispatch gate before doing any other work.
"""

import enum
import logging
from typing import Any

from capture_bridge.schemas import CaptureEvent, GlobalHandlersOptions, StackTrace
from capture_bridge.services.capture import (
    is_error,
    normalize,
    should_capture,
    tag_mechanism,
)
from capture_bridge.services.diagnostics import NO_MATCH, classify
from capture_bridge.services.hub import Hint, Scope, capture_event, capture_exception, get_current_hub
from capture_bridge.services.platforms import exposes, get_platform_context
from capture_bridge.services.stacktrace import event_from_stacktrace, subscribe

logger = logging.getLogger(__name__)

PAGE_NOT_FOUND_MESSAGE = "page not found"


class RegistrarState(str, enum.Enum):
    UNREGISTERED = "UNREGISTERED"
    REGISTERING = "REGISTERING"
    REGISTERED = "REGISTERED"


class GlobalHandlers:
    identifier = "GlobalHandlers"
    name = "GlobalHandlers"

    def __init__(self, options: GlobalHandlersOptions | None = None, ctx: Any = None):
        self.options = options or GlobalHandlersOptions()
        self.ctx = ctx if ctx is not None else get_platform_context()
        self.state = RegistrarState.UNREGISTERED

    def setup_once(self) -> None:
        if self.state is not RegistrarState.UNREGISTERED:
            logger.debug("GlobalHandlers already %s; skipping setup", self.state.value)
            return

        self.state = RegistrarState.REGISTERING

        subscribe(self._on_stacktrace)

        if self.options.onerror and exposes(self.ctx, "on_error"):
            logger.info("Global Error Handler attached: on_error")
            self.install_global_error_handler()

        if self.options.onpagenotfound and exposes(self.ctx, "on_page_not_found"):
            logger.info("Global Handler attached: on_page_not_found")
            self.install_global_page_not_found_handler()

        self.state = RegistrarState.REGISTERED

    # ---- stack-trace feed ----

    def _on_stacktrace(self, stacktrace: StackTrace, is_global: bool, error: BaseException | None) -> None:
        if not should_capture(error):
            return

        hub = get_current_hub()
        # Earlier instances stay subscribed; only the one on the current hub reports.
        if hub.get_integration(GlobalHandlers.identifier) is not self:
            return

        hub.capture_event(
            self.event_from_global_handler(stacktrace),
            hint=Hint(original_exception=error, data={"stack": stacktrace}),
        )

    def event_from_global_handler(self, stacktrace: StackTrace) -> CaptureEvent:
        return tag_mechanism(event_from_stacktrace(stacktrace), stacktrace)

    # ---- platform hooks ----

    def install_global_error_handler(self) -> None:
        self.ctx.on_error(self.handle_error)

    def install_global_page_not_found_handler(self) -> None:
        self.ctx.on_page_not_found(self.handle_page_not_found)

    def handle_error(self, msg: Any) -> None:
        if not should_capture(msg):
            return

        fingerprint = NO_MATCH if is_error(msg) else classify(msg)
        scope = Scope()
        fingerprint_list = fingerprint.as_list()
        if fingerprint_list:
            scope.set_fingerprint(fingerprint_list)

        capture_exception(normalize(msg), scope=scope)

    def handle_page_not_found(self, res: Any) -> None:
        if not should_capture(res):
            return

        capture_event({"message": PAGE_NOT_FOUND_MESSAGE, "extra": res})
