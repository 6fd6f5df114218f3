# backend/capture_bridge/schemas/__init__.py
from __future__ import annotations

"""
Pydantic schemas for captured events and their building blocks.

This module is the event contract layer. It is used by:
- the stack-trace feed (StackTrace, StackFrame)
- the capture core (Mechanism, CaptureEvent)
- the GlobalHandlers integration (GlobalHandlersOptions)
- transports and the delivery task (CaptureEvent payloads)
"""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from capture_bridge.config import Settings


# ---------- Stack traces ----------


class StackFrame(BaseModel):
    filename: str | None = None
    function: str | None = None
    lineno: int | None = None
    context_line: str | None = None


class StackTrace(BaseModel):
    """
    Structured stack trace as published by the stack-trace feed.

    mode describes how the frames were obtained ("stack" when a traceback
    was attached, "failed" when none was available). mechanism names the
    hook that observed the error.
    """

    name: str | None = None
    message: str | None = None
    mode: str | None = None
    mechanism: str = "generic"
    frames: List[StackFrame] = Field(default_factory=list)
    raw: str = ""


# ---------- Mechanism ----------


class MechanismData(BaseModel):
    mode: str | None = None


class Mechanism(BaseModel):
    """How an event was caught. Everything here is an uncaught-path capture."""

    data: MechanismData = Field(default_factory=MechanismData)
    handled: Literal[False] = False
    type: str


# ---------- Events ----------


class CaptureEvent(BaseModel):
    """
    Canonical event record handed to the transport.

    ``extra`` is whatever the capturing path attached, usually a mapping;
    a page-not-found event carries the hook's payload as is.

    ``exception`` keeps the loose ``{"values": [...], "mechanism": {...}}``
    shape so integrations can merge keys into it without replacing it.
    Unknown keys are preserved.
    """

    model_config = ConfigDict(extra="allow")

    event_id: str | None = None
    timestamp: datetime | None = None
    platform: str | None = None
    level: str = "error"
    message: str | None = None
    exception: Optional[Dict[str, Any]] = None
    extra: Any = Field(default_factory=dict)
    tags: Dict[str, str] = Field(default_factory=dict)
    fingerprint: List[str] | None = None
    environment: str | None = None
    release: str | None = None


# ---------- Integration options ----------


class GlobalHandlersOptions(BaseModel):
    """Which platform hooks GlobalHandlers wraps. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    onerror: bool = True
    onpagenotfound: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "GlobalHandlersOptions":
        return cls(
            onerror=settings.global_handlers_onerror,
            onpagenotfound=settings.global_handlers_onpagenotfound,
        )
