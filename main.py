"""Application entry point for Prompt Shelf.

Updates:
  v0.2.0 - 2026-10-17 - Map storage failures to a dedicated exit code.
  v0.1.0 - 2026-10-16 - Wire settings, record store, and CLI commands.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cli.commands import COMMAND_SPECS, CommandContext
from cli.parser import parse_args
from cli.runtime import setup_logging
from cli.settings_summary import print_settings_summary
from config import PromptShelfSettings, SettingsError, load_settings
from core import (
    CollectingErrorReporter,
    PromptShelfError,
    RecordStorageError,
    RecordStore,
    RepositoryError,
    build_record_store,
)

EXIT_SETTINGS = 2
EXIT_STORE_INIT = 3
EXIT_STORAGE = 6


def _initialise_store(
    settings: PromptShelfSettings,
    reporter: CollectingErrorReporter,
    logger: logging.Logger,
) -> RecordStore | None:
    try:
        return build_record_store(settings, error_reporter=reporter)
    except (PromptShelfError, RepositoryError, ValueError) as exc:
        logger.error("Failed to initialise prompt store: %s", exc)
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Entrypoint that wires settings, the record store, and CLI commands."""
    args = parse_args(argv)
    setup_logging(args.logging_config, args.log_level)

    logger = logging.getLogger("prompt_shelf.main")
    try:
        settings = load_settings()
    except SettingsError as exc:
        logger.error("Failed to load settings: %s", exc)
        return EXIT_SETTINGS

    if args.print_settings:
        print_settings_summary(settings)
        return 0

    command = getattr(args, "command", None) or "list"
    spec = COMMAND_SPECS[command]

    reporter = CollectingErrorReporter()
    store = _initialise_store(settings, reporter, logger)
    if store is None:
        return EXIT_STORE_INIT

    context = CommandContext(store=store, reporter=reporter, default_order=settings.default_order)
    try:
        return spec.handler(context, args, logger)
    except RecordStorageError as exc:
        logger.error("Storage failure: %s", exc)
        return EXIT_STORAGE


if __name__ == "__main__":
    raise SystemExit(main())
