"""Configuration settings for the application.

A small Settings container shared by the other components. Tests
override single fields with ``monkeypatch.setattr(settings, ...)``.
"""
from dataclasses import dataclass


@dataclass
class Settings:
    DB_PATH: str = "data/autorefresh.db"
    DEFAULT_REFRESH_SECONDS: int = 10
    LOG_LEVEL: str = "INFO"
    LOCALE: str = "en"


settings = Settings()
