from __future__ import annotations

"""
Database session and Base ORM declarations.

This module depends on:
- capture_bridge.config.settings.get_settings for the DATABASE_URL
It is imported by:
- capture_bridge.models (for Base)
- capture_bridge.services.tasks (for SessionLocal)
- capture_bridge.services.celery_app (init_db at worker start)
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from capture_bridge.config import get_settings

# Load settings once; get_settings() is cached in capture_bridge.config.settings
settings = get_settings()

engine = create_engine(
    settings.database_url,
    future=True,
)

# Session factory used by the delivery worker
SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    future=True,
)

# Base class for all ORM models
Base = declarative_base()


def init_db() -> None:
    """Create the captured_events table if it does not exist yet."""
    # Import for side effect: registers the models on Base.metadata.
    from capture_bridge import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
