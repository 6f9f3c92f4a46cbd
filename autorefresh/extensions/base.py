"""Base class for page decorators.

A page decorator contributes shared behaviour to every rendered page and
owns a small amount of configuration that an administrator edits through
a settings form. The base class handles persistence: the attributes named
in `persisted_fields` are written as one JSON document keyed by the
decorator's component id and read back by `load()`.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Optional, Tuple

from ..core.db import open_connection
from ..core.properties import SystemProperties
from ..repo.extension_state import load_extension_state, save_extension_state

LOG = logging.getLogger(__name__)


class PageDecorator:
    persisted_fields: Tuple[str, ...] = ()

    def __init__(
        self,
        component_id: Optional[str] = None,
        properties: Optional[SystemProperties] = None,
        connection_factory: Optional[Callable[[], Any]] = None,
    ):
        cls = type(self)
        self.component_id = component_id or f"{cls.__module__}.{cls.__qualname__}"
        self.properties = properties if properties is not None else SystemProperties()
        self._connection_factory = connection_factory or open_connection
        self._lock = threading.RLock()

    def state(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.persisted_fields}

    def apply_state(self, state: Dict[str, Any]) -> None:
        """Copy known attributes from `state`; unknown keys are ignored."""
        for name in self.persisted_fields:
            if name in state:
                setattr(self, name, state[name])

    def load(self) -> None:
        """Read persisted state. A missing record keeps the defaults."""
        with self._lock:
            conn = self._connection_factory()
            try:
                stored = load_extension_state(conn, self.component_id)
            finally:
                conn.close()

            if stored is None:
                LOG.debug("No stored state for %s, keeping defaults", self.component_id)
                return
            self.apply_state(stored)

    def save(self) -> None:
        with self._lock:
            state = self.state()
            conn = self._connection_factory()
            try:
                save_extension_state(conn, self.component_id, state)
            finally:
                conn.close()
        LOG.debug("Saved state for %s: %s", self.component_id, state)

    def configure(self, form_data: Dict[str, Any]) -> bool:
        """Bind submitted form data onto this decorator and persist it."""
        with self._lock:
            self.apply_state(form_data)
            self.save()
        return True

    def get_display_name(self) -> str:
        return type(self).__name__


__all__ = ["PageDecorator"]
