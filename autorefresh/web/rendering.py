"""HTML rendering helpers for auto-refreshing pages.

The refresh interval is read from the process-wide property context, not
from the extension, so any component that publishes the property controls
the rendered directive.
"""
from __future__ import annotations

from html import escape

from ..core.config import settings
from ..core.properties import AUTO_REFRESH_SECONDS, SystemProperties


def get_auto_refresh_seconds(properties: SystemProperties) -> int:
    return properties.get_integer(AUTO_REFRESH_SECONDS, int(settings.DEFAULT_REFRESH_SECONDS))


def meta_refresh_tag(seconds: int) -> str:
    # zero or negative values are emitted as-is
    return f'<meta http-equiv="refresh" content="{int(seconds)}">'


def render_page(title: str, body: str, properties: SystemProperties, auto_refresh: bool = False) -> str:
    """Render a minimal HTML page.

    The meta refresh directive is only included when `auto_refresh` is on.
    `body` is inserted verbatim; `title` is escaped.
    """
    head = [f"<title>{escape(title)}</title>"]
    if auto_refresh:
        head.append(meta_refresh_tag(get_auto_refresh_seconds(properties)))

    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        + "\n".join(head)
        + "\n</head>\n"
        "<body>\n"
        f"{body}\n"
        "</body>\n"
        "</html>\n"
    )


__all__ = ["get_auto_refresh_seconds", "meta_refresh_tag", "render_page"]
