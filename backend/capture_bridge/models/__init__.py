# backend/capture_bridge/models/__init__.py
from __future__ import annotations

"""
ORM models for the delivery worker.

This module depends on:
- capture_bridge.db.session.Base for the declarative base

Models:
- CapturedEventRecord: one captured event as received by the worker
"""

import uuid
from datetime import datetime
from typing import Any, Mapping

from sqlalchemy import Column, DateTime, JSON, String, Text
from sqlalchemy.orm import Session

from capture_bridge.db.session import Base


class CapturedEventRecord(Base):
    __tablename__ = "captured_events"

    id = Column(String, primary_key=True, default=lambda: uuid.uuid4().hex)
    level = Column(String, nullable=False, default="error")
    message = Column(Text, nullable=True)
    exception_type = Column(String, nullable=True)
    mechanism_type = Column(String, nullable=True)
    environment = Column(String, nullable=True)
    release = Column(String, nullable=True)
    fingerprint = Column(JSON, nullable=True)
    payload = Column(JSON, nullable=False)
    captured_at = Column(DateTime, nullable=True)
    received_at = Column(DateTime, nullable=False, default=datetime.utcnow)


def _first_exception_type(exception: Any) -> str | None:
    if not isinstance(exception, Mapping):
        return None
    values = exception.get("values") or []
    if values and isinstance(values[0], Mapping):
        return values[0].get("type")
    return None


def _mechanism_type(exception: Any) -> str | None:
    if not isinstance(exception, Mapping):
        return None
    mechanism = exception.get("mechanism")
    if isinstance(mechanism, Mapping):
        return mechanism.get("type")
    return None


def _parse_timestamp(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def store_event(db: Session, payload: Mapping[str, Any]) -> CapturedEventRecord:
    """Persist one event payload and return the stored record."""
    exception = payload.get("exception")
    record = CapturedEventRecord(
        id=payload.get("event_id") or uuid.uuid4().hex,
        level=payload.get("level") or "error",
        message=payload.get("message"),
        exception_type=_first_exception_type(exception),
        mechanism_type=_mechanism_type(exception),
        environment=payload.get("environment"),
        release=payload.get("release"),
        fingerprint=payload.get("fingerprint"),
        payload=dict(payload),
        captured_at=_parse_timestamp(payload.get("timestamp")),
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    return record
