from __future__ import annotations

"""backend/capture_bridge/services/platforms/__init__.py

Host platform contexts.

A context optionally exposes ``on_error(handler)`` and
``on_page_not_found(handler)``. Integrations feature-detect both;
neither is assumed.

- ProcessContext: the interpreter (sys.excepthook)
- FastAPIContext: a FastAPI application
"""

from typing import Any

from capture_bridge.services.platforms.fastapi_context import FastAPIContext
from capture_bridge.services.platforms.process import ProcessContext


def get_platform_context() -> ProcessContext:
    return ProcessContext()


def exposes(ctx: Any, hook: str) -> bool:
    return callable(getattr(ctx, hook, None))


__all__ = ["FastAPIContext", "ProcessContext", "exposes", "get_platform_context"]
