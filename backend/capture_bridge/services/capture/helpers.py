"""Suppression policy shared by the global hooks."""
from __future__ import annotations

import functools
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Callable, Iterator, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

CAPTURED_MARKER = "__capture_bridge_captured__"

# Scoped to the current thread or asyncio task.
_ignore_on_error: ContextVar[int] = ContextVar("ignore_on_error", default=0)


def should_ignore_on_error() -> bool:
    return _ignore_on_error.get() > 0


def is_error(value: Any) -> bool:
    return isinstance(value, BaseException)


def mark_captured(error: BaseException) -> None:
    try:
        setattr(error, CAPTURED_MARKER, True)
    except (AttributeError, TypeError):
        pass


def was_captured(value: Any) -> bool:
    return is_error(value) and bool(getattr(value, CAPTURED_MARKER, False))


@contextmanager
def ignore_on_error() -> Iterator[None]:
    """Silence global error hooks while the block runs.

    Used around code whose errors are reported through another path and
    would otherwise be captured a second time.
    """
    token = _ignore_on_error.set(_ignore_on_error.get() + 1)
    try:
        yield
    finally:
        _ignore_on_error.reset(token)


def wrap(fn: F) -> F:
    """Capture exceptions raised by ``fn`` and re-raise them.

    The exception is reported once through the current hub and marked,
    so the global hooks that see it on its way out skip it.
    """

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return fn(*args, **kwargs)
        except Exception as exc:
            if not was_captured(exc):
                from capture_bridge.services.hub import get_current_hub

                get_current_hub().capture_exception(exc)
                mark_captured(exc)
            raise

    return wrapper  # type: ignore[return-value]
