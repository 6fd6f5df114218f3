# tests/conftest.py
from __future__ import annotations

import sys
import threading

import pytest

from capture_bridge.config import Settings
from capture_bridge.services.hub import Hub, bind_hub
from capture_bridge.services.stacktrace import tracekit
from capture_bridge.services.transports import InMemoryTransport


class FakeContext:
    """Host platform exposing both hooks; keeps the handlers it was given."""

    def __init__(self) -> None:
        self.error_handlers = []
        self.page_not_found_handlers = []

    def on_error(self, handler) -> None:
        self.error_handlers.append(handler)

    def on_page_not_found(self, handler) -> None:
        self.page_not_found_handlers.append(handler)

    def fire_error(self, msg) -> None:
        for handler in self.error_handlers:
            handler(msg)

    def fire_page_not_found(self, res) -> None:
        for handler in self.page_not_found_handlers:
            handler(res)


@pytest.fixture(autouse=True)
def isolated_process_state(monkeypatch):
    # Every test starts from fresh process-wide hook state.
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(threading, "excepthook", threading.excepthook)
    monkeypatch.setattr(tracekit, "_handlers", [])
    monkeypatch.setattr(tracekit, "_installed", False)
    monkeypatch.setattr(tracekit, "_previous_thread_hook", None)

    previous = bind_hub(Hub())
    yield
    bind_hub(previous)


@pytest.fixture
def settings() -> Settings:
    return Settings(transport="memory", environment="test", release="1.2.3", statsig_server_secret=None)


@pytest.fixture
def transport() -> InMemoryTransport:
    return InMemoryTransport()


@pytest.fixture
def ctx() -> FakeContext:
    return FakeContext()
