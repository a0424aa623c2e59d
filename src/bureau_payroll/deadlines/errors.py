"""Errors raised by the deadline engine."""

from __future__ import annotations

from typing import Any


class ConfigurationError(ValueError):
    """Raised when a client's pay frequency or pay-day rule is invalid.

    These are caller-input errors. They are never transient and the engine
    never substitutes a default for the bad value.
    """

    def __init__(self, field: str, value: Any, reason: str | None = None):
        self.field = field
        self.value = value
        self.reason = reason
        msg = f"Invalid {field} {value!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
