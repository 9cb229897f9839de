"""Tests for CLI logging bootstrap.

Updates:
  v0.1.0 - 2026-10-19 - Cover INI config, missing explicit paths, and level overrides.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from cli.runtime import setup_logging

_INI = """\
[loggers]
keys=root

[handlers]
keys=null

[formatters]
keys=plain

[logger_root]
level=WARNING
handlers=null

[handler_null]
class=NullHandler
level=NOTSET
formatter=plain
args=()

[formatter_plain]
format=%(message)s
"""


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


def test_ini_file_is_applied(tmp_path: Path) -> None:
    """A readable INI file configures the root logger and is reported back."""
    config_path = tmp_path / "logging.conf"
    config_path.write_text(_INI, encoding="utf-8")

    applied = setup_logging(config_path)

    assert applied == config_path
    assert logging.getLogger().level == logging.WARNING


def test_missing_explicit_path_warns(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="prompt_shelf.main"):
        applied = setup_logging(tmp_path / "absent.conf")

    assert applied is None
    assert "not found" in caplog.text


def test_default_location_is_optional(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="prompt_shelf.main"):
        applied = setup_logging(None)

    assert applied is None
    assert "not found" not in caplog.text


def test_level_override_wins_over_config(tmp_path: Path) -> None:
    config_path = tmp_path / "logging.conf"
    config_path.write_text(_INI, encoding="utf-8")

    setup_logging(config_path, "debug")

    assert logging.getLogger().level == logging.DEBUG
