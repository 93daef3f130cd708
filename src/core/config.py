"""Centralized configuration for the grocery tracker.

This module consolidates environment-driven settings such as the input
file, the backup destination, file encoding, log level and the web view
bind address.

Other modules should import Settings via `get_settings()` and avoid
reading environment variables directly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .constants import DEFAULT_BACKUP_FILE, DEFAULT_INPUT_FILE


# Load env once at import (idempotent if already loaded elsewhere)
load_dotenv()


@dataclass(frozen=True)
class Settings:
    # Files
    input_file: str = DEFAULT_INPUT_FILE
    backup_file: str = DEFAULT_BACKUP_FILE
    file_encoding: str = "utf-8"

    # Logging goes to stderr; keep it quiet so the menu stays readable
    log_level: str = "WARNING"

    # Web view
    web_host: str = "127.0.0.1"
    web_port: int = 8000


_cached_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return cached settings (loaded from environment) to be used across modules."""
    global _cached_settings
    if _cached_settings is not None:
        return _cached_settings

    _cached_settings = Settings(
        input_file=os.getenv("GROCERY_INPUT_FILE", DEFAULT_INPUT_FILE),
        backup_file=os.getenv("GROCERY_BACKUP_FILE", DEFAULT_BACKUP_FILE),
        file_encoding=os.getenv("GROCERY_FILE_ENCODING", "utf-8"),
        log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        web_host=os.getenv("WEB_HOST", "127.0.0.1"),
        web_port=int(os.getenv("WEB_PORT", "8000")),
    )
    return _cached_settings


def reset_settings() -> None:
    """Drop the cached settings so the next `get_settings()` re-reads the environment."""
    global _cached_settings
    _cached_settings = None
