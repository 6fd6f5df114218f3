# backend/capture_bridge/services/celery_app.py
from __future__ import annotations

"""
Celery application configuration for queued event delivery.

This module defines a single Celery instance:

    celery_app = Celery(...)

It is used by:
- capture_bridge.services.tasks (for task definitions)
- every worker process, which creates the database schema on start
  and flushes capture metrics on exit
- the worker entrypoint via
  `celery -A capture_bridge.services.celery_app.celery_app worker -Q events`
"""

from celery import Celery
from celery.signals import worker_init, worker_process_init, worker_process_shutdown, worker_shutdown

from capture_bridge.config import get_settings
from capture_bridge.db.session import init_db
from capture_bridge.services.statsig_client import shutdown_statsig

settings = get_settings()

celery_app = Celery(
    "capture_bridge_tasks",
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend,
    include=["capture_bridge.services.tasks"],
)

# Route delivery tasks to a dedicated queue
celery_app.conf.task_routes = {
    "capture_bridge.services.tasks.*": {"queue": settings.celery_events_queue},
}


@worker_init.connect
@worker_process_init.connect
def init_worker_db(**kwargs) -> None:
    """Create the schema before the worker takes tasks.

    ``worker_init`` covers the solo and thread pools, ``worker_process_init``
    each prefork child.
    """
    init_db()


@worker_shutdown.connect
@worker_process_shutdown.connect
def flush_worker_metrics(**kwargs) -> None:
    shutdown_statsig()
