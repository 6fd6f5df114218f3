from __future__ import annotations

"""backend/capture_bridge/services/diagnostics/error_classifier.py

Centralized fingerprint classification for uncaught error text.

This module looks at the raw text delivered by a global error hook
(a message, a partial stack, a full Python traceback) and extracts a
stable ``(error_type, error_message)`` pair.

The classification is:
- deterministic (no randomness)
- text-based (pattern matching against known error signatures)
- ordered (first matching rule wins)

Rules, in order:
- python-traceback: "Traceback (most recent call last):" blocks
- envelope: mini-program style "thirdScriptError\\n..." wrappers
- typed-message: "TypeName: message" on the first line
- bare-type: "TypeName" alone on the first line

When nothing matches, both fields are None and the caller supplies
defaults.
"""

import re
from dataclasses import dataclass
from typing import Any, Optional

TRACEBACK_HEADER = "Traceback (most recent call last):"

ENVELOPES = ("thirdScriptError", "MiniProgramError", "webviewScriptError")

_TYPE_NAME = r"(?:[A-Za-z_][\w$]*\.)*(?:[A-Za-z_$][\w$]*)?(?:Error|Exception|Warning|Exit|Interrupt|Iteration)"

_TYPED_MESSAGE = re.compile(rf"^(?P<type>{_TYPE_NAME})\s*:\s*(?P<message>.*)$")
_BARE_TYPE = re.compile(rf"^(?P<type>{_TYPE_NAME})$")

# Python prints the raised type as written, any class name allowed.
_EXCEPTION_LINE = re.compile(r"^(?P<type>(?:[A-Za-z_]\w*\.)*[A-Za-z_]\w*)(?:\s*:\s*(?P<message>.*))?$")


@dataclass(frozen=True)
class Fingerprint:
    """Grouping key derived from an error's text."""

    error_type: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def matched(self) -> bool:
        return self.error_type is not None or self.error_message is not None

    def as_list(self) -> list[str] | None:
        """Scope fingerprint, only when both components were derived."""
        if self.error_type is None or self.error_message is None:
            return None
        return [self.error_type, self.error_message]


NO_MATCH = Fingerprint()


def _text(value: Any) -> str:
    if value is None:
        return ""
    try:
        return str(value).strip()
    except Exception:  # noqa: BLE001
        return ""


def _lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def _message_or_none(value: str) -> Optional[str]:
    value = value.strip()
    return value or None


def _match_typed_line(line: str) -> Fingerprint | None:
    match = _TYPED_MESSAGE.match(line)
    if match:
        return Fingerprint(match.group("type"), _message_or_none(match.group("message")))
    match = _BARE_TYPE.match(line)
    if match:
        return Fingerprint(match.group("type"), None)
    return None


def _classify_traceback(text: str) -> Fingerprint | None:
    if TRACEBACK_HEADER not in text:
        return None
    # The exception line directly follows the last frame (or the last
    # header when there are no frames); later lines continue its message.
    raw_lines = [line for line in text.splitlines() if line.strip()]
    last_frame = max(
        (
            index
            for index, line in enumerate(raw_lines)
            if line[:1].isspace() or line.strip() == TRACEBACK_HEADER
        ),
        default=None,
    )
    if last_frame is None or last_frame + 1 >= len(raw_lines):
        return None

    match = _EXCEPTION_LINE.match(raw_lines[last_frame + 1].strip())
    if not match:
        return None
    return Fingerprint(match.group("type"), _message_or_none(match.group("message") or ""))


def _classify_envelope(lines: list[str]) -> Fingerprint | None:
    if not lines or lines[0] not in ENVELOPES:
        return None
    for line in lines[1:]:
        found = _match_typed_line(line)
        if found is not None:
            return found
    return Fingerprint(lines[0], lines[1] if len(lines) > 1 else None)


def classify(signal: Any) -> Fingerprint:
    """Classify raw error text into a Fingerprint.

    Never raises; returns ``Fingerprint(None, None)`` when no rule matches.
    """
    text = _text(signal)
    if not text:
        return NO_MATCH

    found = _classify_traceback(text)
    if found is not None:
        return found

    lines = _lines(text)

    found = _classify_envelope(lines)
    if found is not None:
        return found

    found = _match_typed_line(lines[0])
    if found is not None:
        return found

    return NO_MATCH
