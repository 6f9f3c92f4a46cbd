"""Top-level package for the auto-refresh settings service.

Holds the refresh-rate page decorator together with the small host
pieces (persistence, property context, rendering) it plugs into.
"""
__all__ = ["api", "core", "extensions", "repo", "web"]
__version__ = "0.1.0"
