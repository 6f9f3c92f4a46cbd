"""Rendered HTML pages that honour the auto-refresh rate."""
from __future__ import annotations

from html import escape

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from ..web.rendering import render_page

router = APIRouter()


@router.get("/pages/{name}", response_class=HTMLResponse)
def get_page(name: str, request: Request, auto_refresh: bool = False):
    """Render page `name`, with a meta refresh directive when `auto_refresh` is set."""
    body = f"<h1>{escape(name)}</h1>"
    return render_page(name, body, request.app.state.properties, auto_refresh=auto_refresh)


__all__ = ["router"]
