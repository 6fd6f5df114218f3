from __future__ import annotations

"""backend/capture_bridge/config/settings.py

Bridge configuration using environment-driven settings.

This module centralizes:
- which global hooks the GlobalHandlers integration installs
- which transport captured events are handed to
- Celery / Redis configuration for queued delivery
- database URL for the delivery worker
- release / environment stamps applied to every event
"""
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
  app_name: str = "capture-bridge"
  environment: str = "development"
  release: str | None = None

  # Global handler toggles
  global_handlers_onerror: bool = True
  global_handlers_onpagenotfound: bool = True

  # Where captured events go
  transport: Literal["memory", "logging", "celery"] = "memory"

  # Celery / Redis
  celery_broker_url: str = "redis://redis:6379/1"
  celery_result_backend: str = "redis://redis:6379/2"
  celery_events_queue: str = "events"

  # Delivery worker storage
  database_url: str = "sqlite:///./captured_events.db"

  # Metrics
  statsig_server_secret: str | None = None

  model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Return a cached Settings instance."""
  return Settings()
