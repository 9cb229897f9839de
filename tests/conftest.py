"""Pytest configuration for shared test fixtures and environment hooks.

Updates:
  v0.1.0 - 2026-10-17 - Isolate tests from local config files and PROMPT_SHELF_* variables.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run each test from an empty directory without inherited settings."""
    for name in list(os.environ):
        if name.upper().startswith("PROMPT_SHELF_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
