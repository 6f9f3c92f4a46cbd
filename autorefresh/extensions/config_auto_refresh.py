"""Auto-refresh rate page decorator.

Lets an administrator set how often auto-refreshing pages reload. The
current rate is persisted and mirrored into the process-wide property
`AUTO_REFRESH_SECONDS` after every load and every update, which is where
the page renderer picks it up.

The rate is not range checked: zero and negative values are stored and
published as given.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..core import messages
from ..core.config import settings
from ..core.properties import AUTO_REFRESH_SECONDS
from .base import PageDecorator

LOG = logging.getLogger(__name__)

# Accepted spellings of the rate field in a submitted form.
FORM_FIELDS = ("refreshRate", "refresh_rate")


class ConfigAutoRefresh(PageDecorator):
    persisted_fields = ("refresh_rate",)

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.refresh_rate: int = int(settings.DEFAULT_REFRESH_SECONDS)

    def initialize(self) -> None:
        """Load persisted state and publish the rate. Called once at startup."""
        self.load()

    def get_refresh_rate(self) -> int:
        return self.refresh_rate

    def set_refresh_rate(self, refresh_rate: int) -> None:
        """Update the rate, publish it, then persist it."""
        with self._lock:
            self.refresh_rate = int(refresh_rate)
            self._publish()
            self.save()
        LOG.info("Auto-refresh rate set to %s seconds", self.refresh_rate)

    def configure(self, form_data: Dict[str, Any]) -> bool:
        value = _extract_refresh_rate(form_data)
        if value is not None:
            self.set_refresh_rate(value)
        return True

    def get_display_name(self, locale: Optional[str] = None) -> str:
        return messages.display_name(locale)

    def apply_state(self, state: Dict[str, Any]) -> None:
        if "refresh_rate" in state:
            self.refresh_rate = int(state["refresh_rate"])

    def load(self) -> None:
        with self._lock:
            super().load()
            self._publish()
        LOG.debug("Loaded auto-refresh rate: %s seconds", self.refresh_rate)

    def _publish(self) -> None:
        self.properties.set_property(AUTO_REFRESH_SECONDS, str(self.refresh_rate))


def _extract_refresh_rate(form_data: Dict[str, Any]) -> Optional[int]:
    for field in FORM_FIELDS:
        if field in form_data and form_data[field] is not None:
            if isinstance(form_data[field], bool):
                raise TypeError(f"{field} must be an integer, not a boolean")
            return int(form_data[field])
    return None


__all__ = ["ConfigAutoRefresh", "FORM_FIELDS"]
