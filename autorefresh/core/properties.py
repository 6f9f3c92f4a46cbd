"""Process-wide property context.

A string-keyed store of string values shared by unrelated parts of the
application. The auto-refresh extension publishes its current rate here and
the page renderer reads it back, so neither needs a reference to the other.
An instance is created at startup and handed to whoever needs it.
"""
from __future__ import annotations

import threading
from typing import Dict, Optional


# Slot read by the renderer to decide the meta refresh interval.
AUTO_REFRESH_SECONDS = "hudson.Functions.autoRefreshSeconds"


class SystemProperties:
    """Thread-safe mapping of property names to string values."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._lock = threading.Lock()
        self._values: Dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.set_property(key, value)

    def get_property(self, key: str, default: Optional[str] = None) -> Optional[str]:
        with self._lock:
            return self._values.get(key, default)

    def set_property(self, key: str, value: str) -> Optional[str]:
        """Store `value` under `key` and return the previous value, if any."""
        if not isinstance(value, str):
            raise TypeError(f"property {key!r} must be a str, got {type(value).__name__}")
        with self._lock:
            previous = self._values.get(key)
            self._values[key] = value
            return previous

    def clear_property(self, key: str) -> Optional[str]:
        with self._lock:
            return self._values.pop(key, None)

    def get_integer(self, key: str, default: int) -> int:
        """Parse the slot as a decimal integer.

        Missing or unparsable values yield `default`.
        """
        raw = self.get_property(key)
        if raw is None:
            return default
        try:
            return int(raw.strip())
        except ValueError:
            return default

    def snapshot(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._values)


__all__ = ["AUTO_REFRESH_SECONDS", "SystemProperties"]
