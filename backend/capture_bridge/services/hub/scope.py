"""Per-capture scope passed explicitly into a single capture call."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from capture_bridge.schemas import CaptureEvent


@dataclass
class Scope:
    fingerprint: Optional[List[str]] = None
    level: Optional[str] = None
    tags: Dict[str, str] = field(default_factory=dict)
    extra: Dict[str, Any] = field(default_factory=dict)

    def set_fingerprint(self, fingerprint: List[str]) -> None:
        self.fingerprint = list(fingerprint)

    def set_tag(self, key: str, value: str) -> None:
        self.tags[key] = value

    def set_extra(self, key: str, value: Any) -> None:
        self.extra[key] = value

    def apply_to_event(self, event: CaptureEvent) -> CaptureEvent:
        """Return a copy of ``event`` carrying this scope's data.

        Values already on the event win over the scope's. A non-mapping
        ``extra`` on the event is left untouched.
        """
        update: Dict[str, Any] = {}
        if self.fingerprint and not event.fingerprint:
            update["fingerprint"] = list(self.fingerprint)
        if self.level and event.level == "error":
            update["level"] = self.level
        if self.tags:
            update["tags"] = {**self.tags, **event.tags}
        if self.extra and isinstance(event.extra, Mapping):
            update["extra"] = {**self.extra, **event.extra}
        if not update:
            return event
        return event.model_copy(update=update)
