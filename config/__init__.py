"""Configuration helpers for Prompt Shelf.

Updates: v0.2.0 - 2026-10-14 - Expose storage defaults alongside the settings loader.
Updates: v0.1.0 - 2026-10-11 - Expose settings loader and configuration error types.
"""

from .settings import (
    DEFAULT_JSON_STORAGE_PATH,
    DEFAULT_LOCALE,
    DEFAULT_ORDER,
    DEFAULT_SQLITE_STORAGE_PATH,
    DEFAULT_STORAGE_BACKEND,
    DEFAULT_STORAGE_KEY,
    PromptShelfSettings,
    SettingsError,
    load_settings,
)

__all__ = [
    "DEFAULT_JSON_STORAGE_PATH",
    "DEFAULT_LOCALE",
    "DEFAULT_ORDER",
    "DEFAULT_SQLITE_STORAGE_PATH",
    "DEFAULT_STORAGE_BACKEND",
    "DEFAULT_STORAGE_KEY",
    "PromptShelfSettings",
    "SettingsError",
    "load_settings",
]
