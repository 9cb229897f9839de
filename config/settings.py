"""Settings management utilities for Prompt Shelf configuration.

Updates:
  v0.2.1 - 2026-10-16 - Read `.env` values through python-dotenv without touching os.environ.
  v0.2.0 - 2026-10-14 - Add storage key, locale, and default list order settings.
  v0.1.0 - 2026-10-11 - Initial JSON/env settings loader for storage backends.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal, cast

from dotenv import dotenv_values
from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

_DOTENV_FALLBACK_PATH = ".env"

DEFAULT_STORAGE_BACKEND = "json"
DEFAULT_JSON_STORAGE_PATH = Path("data") / "prompts.json"
DEFAULT_SQLITE_STORAGE_PATH = Path("data") / "prompt_shelf.db"
DEFAULT_STORAGE_KEY = "prompts"
DEFAULT_LOCALE = "en"
DEFAULT_ORDER = "createdAt"

_ORDER_CHOICES = {"createdAt", "updatedAt", "usage"}

# Field -> environment keys (without prefix) accepted for it.
_ENV_KEYS: dict[str, list[str]] = {
    "storage_backend": ["STORAGE_BACKEND", "storage_backend"],
    "storage_path": ["STORAGE_PATH", "storage_path", "DB_PATH", "db_path"],
    "storage_key": ["STORAGE_KEY", "storage_key"],
    "locale": ["LOCALE", "locale"],
    "default_order": ["DEFAULT_ORDER", "default_order"],
}


def _read_dotenv_values() -> dict[str, str]:
    """Load ``.env`` entries into a mapping without mutating ``os.environ``."""
    env_file_override = os.getenv("PROMPT_SHELF_ENV_FILE")
    if env_file_override is not None:
        candidate = env_file_override.strip()
        if not candidate:
            return {}
        path = Path(candidate).expanduser()
    else:
        path = Path(_DOTENV_FALLBACK_PATH).expanduser()
    if not path.is_file():
        return {}
    raw_values = dotenv_values(str(path))
    return {str(key): str(value) for key, value in raw_values.items() if value is not None}


class SettingsError(Exception):
    """Raised when Prompt Shelf configuration cannot be loaded or validated."""


class PromptShelfSettings(BaseSettings):
    """Application configuration sourced from environment variables or JSON files."""

    storage_backend: Literal["json", "sqlite", "memory"] = Field(
        default=DEFAULT_STORAGE_BACKEND,
        description="Persistence backend holding the prompt collection (json, sqlite, memory).",
    )
    storage_path: Path | None = Field(
        default=None,
        description=(
            "File used by the json or sqlite backend; defaults to data/prompts.json or "
            "data/prompt_shelf.db depending on the backend."
        ),
    )
    storage_key: str = Field(
        default=DEFAULT_STORAGE_KEY,
        description="Key under which the collection is stored in the key-value backend.",
    )
    locale: str = Field(
        default=DEFAULT_LOCALE,
        description="Locale used to resolve validation messages (en, es).",
    )
    default_order: Literal["createdAt", "updatedAt", "usage"] = Field(
        default=DEFAULT_ORDER,
        description="Sort order applied by the list command when none is given.",
    )

    model_config = cast(
        "SettingsConfigDict",
        {
            "env_prefix": "PROMPT_SHELF_",
            "case_sensitive": False,
            "populate_by_name": True,
        },
    )

    @field_validator("storage_backend", mode="before")
    def _normalise_backend(cls, value: object) -> str:
        if value in (None, ""):
            return DEFAULT_STORAGE_BACKEND
        backend = str(value).strip().lower()
        if backend in {"file", "json"}:
            return "json"
        if backend in {"sqlite", "sqlite3", "db"}:
            return "sqlite"
        if backend in {"memory", "in-memory", "none"}:
            return "memory"
        raise ValueError(f"Unsupported storage backend '{value}'")

    @field_validator("storage_path", mode="before")
    def _normalise_path(cls, value: Any) -> Path | None:
        """Expand user-relative paths and coerce values to Path instances."""
        if value in (None, ""):
            return None
        return Path(str(value)).expanduser().resolve()

    @field_validator("storage_key", mode="before")
    def _normalise_key(cls, value: object) -> str:
        if value is None:
            return DEFAULT_STORAGE_KEY
        key = str(value).strip()
        if not key:
            raise ValueError("storage_key must not be empty")
        return key

    @field_validator("locale", mode="before")
    def _normalise_locale(cls, value: object) -> str:
        if value is None:
            return DEFAULT_LOCALE
        text = str(value).strip()
        return text or DEFAULT_LOCALE

    @field_validator("default_order", mode="before")
    def _normalise_order(cls, value: object) -> str:
        if value in (None, ""):
            return DEFAULT_ORDER
        text = str(value).strip()
        if text == "updated_at":
            return "updatedAt"
        if text == "created_at":
            return "createdAt"
        if text not in _ORDER_CHOICES:
            raise ValueError("default_order must be one of: createdAt, updatedAt, usage")
        return text

    @model_validator(mode="after")
    def _resolve_storage_path(self) -> PromptShelfSettings:
        if self.storage_path is None and self.storage_backend != "memory":
            default = (
                DEFAULT_SQLITE_STORAGE_PATH
                if self.storage_backend == "sqlite"
                else DEFAULT_JSON_STORAGE_PATH
            )
            self.storage_path = default.resolve()
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
    ]:
        """Define configuration source precedence.

        Order (highest → lowest):
            1. Explicit keyword arguments (e.g. load_settings(locale="es")).
            2. JSON configuration file (application settings).
            3. Environment variables and ``.env`` entries.
            4. File secrets.
        """

        def env_with_aliases(_: BaseSettings | None = None) -> dict[str, Any]:
            data: dict[str, Any] = {}
            config_dict = cast("dict[str, Any]", cls.model_config)
            prefix = str(config_dict.get("env_prefix", ""))
            dotenv_entries = _read_dotenv_values()

            def _lookup(candidate: str) -> str | None:
                value = os.getenv(candidate)
                if value is None:
                    value = dotenv_entries.get(candidate)
                if value is None:
                    return None
                stripped_value = str(value).strip()
                return stripped_value or None

            for field, keys in _ENV_KEYS.items():
                for key in keys:
                    value = _lookup(f"{prefix}{key}") or _lookup(f"{prefix}{key.upper()}")
                    if value is not None:
                        data[field] = value
                        break
            return data

        return (
            init_settings,
            cls._json_config_settings_source(settings_cls),
            cast("PydanticBaseSettingsSource", env_with_aliases),
            file_secret_settings,
        )

    @classmethod
    def _json_config_settings_source(
        cls,
        _: type[BaseSettings],
    ) -> PydanticBaseSettingsSource:
        """Return settings extracted from an optional JSON config file."""

        def _loader(_: BaseSettings | None = None) -> dict[str, Any]:
            explicit_path = os.getenv("PROMPT_SHELF_CONFIG_JSON")
            candidates: list[Path] = []
            if explicit_path:
                candidates.append(Path(explicit_path).expanduser())
            candidates.append((Path("config") / "config.json").expanduser())

            for path in candidates:
                if not path.exists():
                    if explicit_path and path == candidates[0]:
                        raise SettingsError(f"Configuration file not found: {path}")
                    continue
                try:
                    raw_contents = path.read_text(encoding="utf-8")
                except OSError as exc:  # pragma: no cover - filesystem failure is env-specific
                    raise SettingsError(f"Unable to read configuration file: {path}") from exc
                try:
                    data = json.loads(raw_contents)
                except json.JSONDecodeError as exc:
                    raise SettingsError(f"Invalid JSON in configuration file: {path}") from exc
                if not isinstance(data, dict):
                    message = f"Configuration file {path} must contain a JSON object"
                    raise SettingsError(message)
                mapping_data = cast("Mapping[object, Any]", data)
                data_dict: dict[str, Any] = {str(key): value for key, value in mapping_data.items()}
                mapped: dict[str, Any] = {}
                if "db_path" in data_dict and "storage_path" not in data_dict:
                    mapped["storage_path"] = data_dict["db_path"]
                for key in _ENV_KEYS:
                    if key in data_dict:
                        mapped[key] = data_dict[key]
                unknown = sorted(set(data_dict) - set(_ENV_KEYS) - {"db_path"})
                if unknown:
                    logger.warning(
                        "Ignoring unknown key(s) %s in configuration file %s",
                        ", ".join(unknown),
                        path,
                    )
                return mapped
            return {}

        return cast("PydanticBaseSettingsSource", _loader)


def load_settings(**overrides: Any) -> PromptShelfSettings:
    """Return validated settings, raising SettingsError on failure."""
    try:
        return PromptShelfSettings(**overrides)
    except SettingsError:
        raise
    except ValidationError as exc:
        raise SettingsError("Invalid Prompt Shelf configuration") from exc


logger = logging.getLogger("prompt_shelf.settings")
