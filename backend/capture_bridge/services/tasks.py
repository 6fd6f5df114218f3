# backend/capture_bridge/services/tasks.py
from __future__ import annotations

"""
Celery tasks for the capture bridge.

Currently provides:
- deliver_event_task: persist a captured event payload on the worker.
"""

from typing import Any, Dict

from capture_bridge.db.session import SessionLocal
from capture_bridge.models import store_event
from capture_bridge.services.celery_app import celery_app


@celery_app.task(name="capture_bridge.services.tasks.deliver_event_task")
def deliver_event_task(payload: Dict[str, Any]) -> str:
    """
    Celery task: store one CaptureEvent payload.

    The payload is ``CaptureEvent.model_dump(mode="json")`` as queued by
    CeleryTransport. Returns the stored event id.
    """
    db = SessionLocal()
    try:
        record = store_event(db, payload)
        return record.id
    finally:
        db.close()
