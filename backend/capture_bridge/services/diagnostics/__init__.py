from __future__ import annotations

"""
Diagnostics and error classification utilities.

This package currently provides:
- error_classifier: extract a stable (error_type, error_message)
  fingerprint from raw uncaught-error text, used for grouping and for
  synthesizing an error object when the platform handed us only a string.

The goal is to keep classification logic centralized and deterministic.
"""

from .error_classifier import NO_MATCH, Fingerprint, classify  # noqa: F401
