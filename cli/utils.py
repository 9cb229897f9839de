"""Shared CLI utility functions for Prompt Shelf commands.

Updates:
  v0.1.0 - 2026-10-16 - Extract stdout logging, path descriptions, and record formatting.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from logging import Logger

    from models.prompt_record import PromptRecord


def print_and_log(logger: Logger, level: int, message: str) -> None:
    """Log *message* at *level* and mirror it to stdout."""
    logger.log(level, message)
    print(message)


def describe_path(
    path_value: object,
    *,
    expect_directory: bool,
    allow_missing_file: bool = False,
) -> str:
    """Return a human-friendly description of *path_value* suitability."""
    try:
        path = Path(path_value) if path_value is not None else None  # type: ignore[arg-type]
    except TypeError:
        path = None
    if path is None:
        return "not set"

    resolved = path.expanduser()
    if resolved.exists():
        if expect_directory and not resolved.is_dir():
            return f"{resolved} (exists but is not a directory)"
        if not expect_directory and resolved.is_dir():
            return f"{resolved} (exists but is a directory)"
        return f"{resolved} (exists)"

    message = f"{resolved} (missing)"
    if not expect_directory and allow_missing_file:
        message = f"{resolved} (missing - created on demand)"
    parent = resolved.parent
    if not parent.exists():
        message += f", parent missing: {parent}"
    return message


def format_timestamp(value: int) -> str:
    """Render epoch milliseconds as an ISO-8601 UTC string."""
    try:
        moment = datetime.fromtimestamp(value / 1000, tz=UTC)
    except (OverflowError, OSError, ValueError):
        return str(value)
    return moment.isoformat(timespec="seconds")


def preview_text(text: str, limit: int = 60) -> str:
    """Collapse whitespace and truncate *text* for single-line listings."""
    flattened = " ".join(text.split())
    if len(flattened) <= limit:
        return flattened
    return flattened[: limit - 3].rstrip() + "..."


def format_record_line(record: PromptRecord) -> str:
    """Return a one-line summary used by the list command."""
    star = "*" if record.favorite else " "
    tags = ", ".join(record.tags) if record.tags else "-"
    return (
        f"{star} {record.id}  [{record.folder_id or '-'}]  uses:{record.usage_count}  "
        f"tags:{tags}  {preview_text(record.text)}"
    )


__all__ = [
    "describe_path",
    "format_record_line",
    "format_timestamp",
    "preview_text",
    "print_and_log",
]
