"""Printable summaries for Prompt Shelf configuration.

Updates:
  v0.1.0 - 2026-10-16 - Extract CLI settings summary rendering.
"""

from __future__ import annotations

from config import PromptShelfSettings

from .utils import describe_path


def print_settings_summary(settings: PromptShelfSettings) -> None:
    """Emit a readable summary of storage and display configuration."""
    backend = settings.storage_backend
    if backend == "memory":
        storage_desc = "in-memory (not persisted)"
    else:
        storage_desc = describe_path(
            settings.storage_path,
            expect_directory=False,
            allow_missing_file=True,
        )

    lines = [
        "Prompt Shelf configuration summary",
        "----------------------------------",
        f"Storage backend: {backend}",
        f"Storage path: {storage_desc}",
        f"Storage key: {settings.storage_key}",
        "",
        "Display",
        "-------",
        f"Locale: {settings.locale}",
        f"Default list order: {settings.default_order}",
    ]
    print("\n".join(lines))


__all__ = ["print_settings_summary"]
