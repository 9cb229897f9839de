"""Runtime boot helpers for Prompt Shelf CLI.

Updates:
  v0.2.0 - 2026-10-19 - Honour --log-level and warn about a missing explicit config file.
  v0.1.0 - 2026-10-16 - Extract logging configuration helpers.
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path

DEFAULT_LOGGING_CONFIG = Path("config") / "logging.conf"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("prompt_shelf.main")


def setup_logging(logging_conf_path: Path | None, level: str | None = None) -> Path | None:
    """Configure logging and return the INI file that was applied, if any.

    An explicit *logging_conf_path* that does not exist or fails to parse falls
    back to ``basicConfig``. *level* overrides the root level either way.
    """
    applied: Path | None = None
    path = logging_conf_path or DEFAULT_LOGGING_CONFIG
    if path.exists():
        try:
            logging.config.fileConfig(path, disable_existing_loggers=False)
            applied = path
        except (OSError, ValueError, KeyError, RuntimeError):
            logger.warning("Invalid logging configuration %s; using defaults", path, exc_info=True)
    elif logging_conf_path is not None:
        logger.warning("Logging configuration %s not found; using defaults", path)

    if applied is None:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if level:
        logging.getLogger().setLevel(level.upper())
    return applied


__all__ = ["DEFAULT_LOGGING_CONFIG", "setup_logging"]
