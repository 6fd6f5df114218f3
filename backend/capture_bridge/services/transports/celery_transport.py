"""Queue captured events for delivery by the Celery worker."""
from __future__ import annotations

import logging

from capture_bridge.schemas import CaptureEvent

logger = logging.getLogger(__name__)


class CeleryTransport:
    name = "celery"

    def send(self, event: CaptureEvent) -> None:
        # Importing tasks builds the Celery app.
        from capture_bridge.services.tasks import deliver_event_task

        payload = event.model_dump(mode="json")
        deliver_event_task.delay(payload)
        logger.debug("Queued event %s for delivery", event.event_id)
