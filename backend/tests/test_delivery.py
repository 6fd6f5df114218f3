# tests/test_delivery.py
from __future__ import annotations

import logging

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from capture_bridge.db import session as db_session
from capture_bridge.db.session import Base
from capture_bridge.models import CapturedEventRecord, store_event
from capture_bridge.sdk import init
from capture_bridge.services import tasks
from capture_bridge.services.celery_app import init_worker_db
from capture_bridge.services.transports import (
    CeleryTransport,
    InMemoryTransport,
    LoggingTransport,
    get_transport,
)


@pytest.fixture
def db_session_factory():
    engine = create_engine("sqlite:///:memory:", future=True)
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    yield factory
    engine.dispose()


def _payload() -> dict:
    return {
        "event_id": "abc123",
        "timestamp": "2026-10-19T08:30:00+00:00",
        "level": "error",
        "message": None,
        "exception": {
            "values": [{"type": "TypeError", "value": "boom"}],
            "mechanism": {"data": {"mode": "stack"}, "handled": False, "type": "threading"},
        },
        "fingerprint": ["TypeError", "boom"],
        "environment": "test",
        "release": "1.2.3",
    }


def test_store_event_extracts_columns(db_session_factory):
    db = db_session_factory()
    record = store_event(db, _payload())

    assert record.id == "abc123"
    assert record.exception_type == "TypeError"
    assert record.mechanism_type == "threading"
    assert record.fingerprint == ["TypeError", "boom"]
    assert record.captured_at.year == 2026
    assert db.query(CapturedEventRecord).count() == 1
    db.close()


def test_store_event_tolerates_sparse_payload(db_session_factory):
    db = db_session_factory()
    record = store_event(db, {"message": "page not found", "timestamp": "not a date"})

    assert record.id
    assert record.level == "error"
    assert record.exception_type is None
    assert record.mechanism_type is None
    assert record.captured_at is None
    db.close()


def test_deliver_event_task_persists_payload(db_session_factory, monkeypatch):
    monkeypatch.setattr(tasks, "SessionLocal", db_session_factory)

    stored_id = tasks.deliver_event_task(_payload())

    db = db_session_factory()
    assert stored_id == "abc123"
    assert db.get(CapturedEventRecord, "abc123").release == "1.2.3"
    db.close()


def test_worker_start_creates_schema_for_delivery(tmp_path, monkeypatch):
    db_session.engine.dispose()
    monkeypatch.chdir(tmp_path)

    try:
        init_worker_db()
        stored_id = tasks.deliver_event_task(_payload())

        db = db_session.SessionLocal()
        assert stored_id == "abc123"
        assert db.get(CapturedEventRecord, "abc123").exception_type == "TypeError"
        db.close()
    finally:
        db_session.engine.dispose()


def test_celery_transport_queues_json_payload(settings, monkeypatch):
    queued = []
    monkeypatch.setattr(tasks.deliver_event_task, "delay", queued.append)

    hub = init(settings=settings, integrations=[], transport=CeleryTransport())
    event_id = hub.capture_event({"message": "queued", "extra": {"n": 1}})

    assert len(queued) == 1
    assert queued[0]["event_id"] == event_id
    assert queued[0]["message"] == "queued"
    assert isinstance(queued[0]["timestamp"], str)


def test_logging_transport_writes_payload(settings, caplog):
    hub = init(settings=settings, integrations=[], transport=LoggingTransport())

    with caplog.at_level(logging.ERROR, logger="capture_bridge.services.transports.base"):
        hub.capture_event({"message": "logged"})

    assert '"message": "logged"' in caplog.text


def test_get_transport_by_name(settings):
    assert isinstance(get_transport(settings), InMemoryTransport)
    assert isinstance(get_transport(settings.model_copy(update={"transport": "logging"})), LoggingTransport)
    assert isinstance(get_transport(settings.model_copy(update={"transport": "celery"})), CeleryTransport)

    with pytest.raises(ValueError):
        get_transport(settings.model_copy(update={"transport": "carrier-pigeon"}))
