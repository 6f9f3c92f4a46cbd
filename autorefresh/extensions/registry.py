"""Explicit extension lifecycle.

Extensions are constructed, loaded and registered once from the
application's startup sequence.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from ..core.properties import SystemProperties
from .base import PageDecorator
from .config_auto_refresh import ConfigAutoRefresh

LOG = logging.getLogger(__name__)

T = TypeVar("T", bound=PageDecorator)


class ExtensionRegistry:
    def __init__(self):
        self._extensions: Dict[type, PageDecorator] = {}

    def register(self, extension: PageDecorator) -> PageDecorator:
        cls = type(extension)
        if cls in self._extensions:
            raise ValueError(f"extension {cls.__name__} is already registered")
        self._extensions[cls] = extension
        return extension

    def get(self, cls: Type[T]) -> T:
        try:
            return self._extensions[cls]  # type: ignore[return-value]
        except KeyError:
            raise LookupError(f"extension {cls.__name__} is not registered") from None

    def all(self) -> List[PageDecorator]:
        return list(self._extensions.values())

    def initialize_all(self) -> None:
        for extension in self._extensions.values():
            extension.load()
            LOG.info("Initialized extension %s", extension.component_id)


def init_extensions(
    properties: SystemProperties,
    connection_factory: Optional[Callable[[], Any]] = None,
) -> ExtensionRegistry:
    """Build the registry used by the application and load every extension."""
    registry = ExtensionRegistry()
    registry.register(ConfigAutoRefresh(properties=properties, connection_factory=connection_factory))
    registry.initialize_all()
    return registry


__all__ = ["ExtensionRegistry", "init_extensions"]
