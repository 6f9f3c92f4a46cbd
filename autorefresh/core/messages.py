"""Message catalog for user-facing labels.

Labels are looked up by message id and locale; unknown locales fall back
to English.
"""
from __future__ import annotations

from typing import Dict, Optional

from .config import settings


DEFAULT_LOCALE = "en"

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "DisplayName": "Config AutoRefresh",
        "RefreshRate": "Auto-refresh rate (seconds)",
    },
    "de": {
        "DisplayName": "Automatische Aktualisierung konfigurieren",
        "RefreshRate": "Aktualisierungsintervall (Sekunden)",
    },
    "fr": {
        "DisplayName": "Configuration du rafraîchissement automatique",
        "RefreshRate": "Intervalle de rafraîchissement (secondes)",
    },
}


def _normalize_locale(locale: Optional[str]) -> str:
    if not locale:
        return settings.LOCALE or DEFAULT_LOCALE
    # "fr_FR" / "fr-FR" -> "fr"
    return locale.replace("-", "_").split("_")[0].lower()


def get_message(key: str, locale: Optional[str] = None) -> str:
    """Return the label for `key` in `locale`, falling back to English."""
    lang = _normalize_locale(locale)
    catalog = MESSAGES.get(lang, {})
    if key in catalog:
        return catalog[key]
    return MESSAGES[DEFAULT_LOCALE][key]


def display_name(locale: Optional[str] = None) -> str:
    return get_message("DisplayName", locale)


__all__ = ["MESSAGES", "get_message", "display_name"]
