"""API endpoints for the auto-refresh settings form.

GET returns the labels and current rate; POST binds a submitted rate onto
the `ConfigAutoRefresh` extension registered at startup.
"""
from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core import messages
from ..extensions.config_auto_refresh import ConfigAutoRefresh

router = APIRouter()

LOG = logging.getLogger(__name__)


class AutoRefreshForm(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    refresh_rate: Optional[int] = Field(default=None, alias="refreshRate")

    @field_validator("refresh_rate", mode="before")
    @classmethod
    def _reject_booleans(cls, value):
        # JSON true/false would otherwise coerce to 1/0
        if isinstance(value, bool):
            raise ValueError("refreshRate must be an integer, not a boolean")
        return value


def _get_extension(request: Request) -> ConfigAutoRefresh:
    return request.app.state.extensions.get(ConfigAutoRefresh)


@router.get("/configure/auto-refresh")
def get_auto_refresh(request: Request, locale: Optional[str] = None):
    """Return the settings label and the current refresh rate."""
    ext = _get_extension(request)
    return {
        "display_name": ext.get_display_name(locale),
        "field_label": messages.get_message("RefreshRate", locale),
        "refresh_rate": ext.get_refresh_rate(),
    }


@router.post("/configure/auto-refresh")
def post_auto_refresh(payload: AutoRefreshForm, request: Request):
    """Apply a submitted refresh rate. Any integer is accepted."""
    ext = _get_extension(request)
    try:
        ext.configure(payload.model_dump(exclude_none=True))
    except sqlite3.Error as exc:
        LOG.exception("Failed to persist auto-refresh rate")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to save auto-refresh rate") from exc

    return {"status": "ok", "refresh_rate": ext.get_refresh_rate()}


__all__ = ["router"]
