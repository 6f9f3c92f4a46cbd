from .base import PageDecorator
from .config_auto_refresh import ConfigAutoRefresh
from .registry import ExtensionRegistry, init_extensions

__all__ = ["PageDecorator", "ConfigAutoRefresh", "ExtensionRegistry", "init_extensions"]
