"""Capability interfaces injected into the record store, with default implementations.

Updates:
  v0.2.0 - 2026-10-14 - Add Spanish message table and collecting error reporter.
  v0.1.0 - 2026-10-11 - Introduce id generator, message catalog, and error reporter seams.
"""

from __future__ import annotations

import logging
import uuid
from typing import Protocol

from .exceptions import FailureKind

logger = logging.getLogger("prompt_shelf.errors")

DEFAULT_LOCALE = "en"

MESSAGE_TABLES: dict[str, dict[FailureKind, str]] = {
    "en": {
        FailureKind.INVALID_RECORD: "The prompt text cannot be empty.",
        FailureKind.FOLDER_REQUIRED: "Select a folder for this prompt.",
        FailureKind.DUPLICATE_ID: "A prompt with this id already exists.",
        FailureKind.NOT_FOUND: "The prompt you are editing no longer exists.",
    },
    "es": {
        FailureKind.INVALID_RECORD: "El texto del prompt no puede estar vacío.",
        FailureKind.FOLDER_REQUIRED: "Selecciona una carpeta para este prompt.",
        FailureKind.DUPLICATE_ID: "Ya existe un prompt con este identificador.",
        FailureKind.NOT_FOUND: "El prompt que estás editando ya no existe.",
    },
}


class IdGenerator(Protocol):
    """Produce fresh unique opaque ids."""

    def new_id(self) -> str: ...


class MessageCatalog(Protocol):
    """Resolve a human-facing message for a validation failure."""

    def message_for(self, kind: FailureKind) -> str: ...


class ErrorReporter(Protocol):
    """Surface a human-facing validation message."""

    def report(self, message: str) -> None: ...


class UuidIdGenerator:
    """Generate random UUID4 strings."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


class LocalizedMessageCatalog:
    """Message catalog backed by static per-locale tables."""

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        """Select the table for *locale*, falling back to English when unknown."""
        normalised = (locale or DEFAULT_LOCALE).strip().lower().split("-")[0].split("_")[0]
        if normalised not in MESSAGE_TABLES:
            logger.warning("Unknown locale %r; falling back to %s", locale, DEFAULT_LOCALE)
            normalised = DEFAULT_LOCALE
        self.locale = normalised
        self._messages = MESSAGE_TABLES[normalised]

    def message_for(self, kind: FailureKind) -> str:
        return self._messages.get(kind) or MESSAGE_TABLES[DEFAULT_LOCALE][kind]


class LoggingErrorReporter:
    """Report validation messages through the application log."""

    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target or logger

    def report(self, message: str) -> None:
        self._logger.warning(message)


class CollectingErrorReporter:
    """Keep reported messages in memory so callers can display them later."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def report(self, message: str) -> None:
        self.messages.append(message)

    def drain(self) -> list[str]:
        """Return and clear the collected messages."""
        collected, self.messages = self.messages, []
        return collected


__all__ = [
    "CollectingErrorReporter",
    "DEFAULT_LOCALE",
    "ErrorReporter",
    "IdGenerator",
    "LocalizedMessageCatalog",
    "LoggingErrorReporter",
    "MESSAGE_TABLES",
    "MessageCatalog",
    "UuidIdGenerator",
]
