"""Integration checks for the command-line entry point.

Updates:
  v0.2.0 - 2026-10-17 - Cover copy/tags commands and storage failure exit codes.
  v0.1.0 - 2026-10-16 - Cover settings summary and record management commands.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import main


@pytest.fixture()
def storage_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    path = tmp_path / "shelf" / "prompts.json"
    monkeypatch.setenv("PROMPT_SHELF_STORAGE_PATH", str(path))
    return path


def _stored(path: Path) -> list[dict[str, object]]:
    return json.loads(path.read_text(encoding="utf-8"))["prompts"]


def _add(text: str, prompt_id: str, *extra: str) -> int:
    return main.main(["add", text, "--folder", "work", "--id", prompt_id, *extra])


def test_print_settings_outputs_summary(
    storage_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """--print-settings renders the resolved configuration and exits cleanly."""
    exit_code = main.main(["--print-settings"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Prompt Shelf configuration summary" in out
    assert "Storage backend: json" in out
    assert str(storage_path) in out
    assert "missing - created on demand" in out


def test_invalid_settings_exit_with_settings_code(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROMPT_SHELF_STORAGE_BACKEND", "postgres")

    assert main.main(["list"]) == main.EXIT_SETTINGS


def test_add_list_and_show_round_trip(
    storage_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Added prompts are persisted and visible to list and show."""
    assert _add("Write a haiku", "p1", "--tag", "poetry", "--tag", "short") == 0
    assert _add("Summarise meeting notes", "p2", "--favorite") == 0
    capsys.readouterr()

    assert [item["id"] for item in _stored(storage_path)] == ["p1", "p2"]

    assert main.main(["list", "--tag", "poetry"]) == 0
    out = capsys.readouterr().out
    assert "p1" in out
    assert "p2" not in out

    assert main.main(["show", "p2"]) == 0
    out = capsys.readouterr().out
    assert "Favorite: yes" in out
    assert "Summarise meeting notes" in out


def test_list_json_output_respects_filters(
    storage_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _add("alpha", "p1")
    _add("beta", "p2", "--favorite")
    capsys.readouterr()

    assert main.main(["list", "--favorite", "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert [item["id"] for item in payload] == ["p2"]
    assert payload[0]["folderId"] == "work"


def test_list_on_empty_store(storage_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main.main([]) == 0

    assert "No prompts match" in capsys.readouterr().out
    assert not storage_path.exists()


def test_add_without_folder_reports_validation_message(
    storage_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Validation failures print the localized message and exit with code 4."""
    exit_code = main.main(["add", "No folder here"])

    assert exit_code == 4
    assert "Select a folder for this prompt." in capsys.readouterr().out
    assert not storage_path.exists()


def test_localized_validation_message(
    storage_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("PROMPT_SHELF_LOCALE", "es")

    assert main.main(["add", "   ", "--folder", "work"]) == 4

    assert "El texto del prompt no puede estar vacío." in capsys.readouterr().out


def test_duplicate_id_is_rejected(storage_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _add("first", "dup")

    assert _add("second", "dup") == 4
    assert "already exists" in capsys.readouterr().out
    assert len(_stored(storage_path)) == 1


def test_edit_updates_text_and_tags(storage_path: Path) -> None:
    _add("draft", "p1", "--tag", "old")

    exit_code = main.main(["edit", "p1", "--folder", "archive", "--text", "final", "--tag", "new"])

    assert exit_code == 0
    stored = _stored(storage_path)[0]
    assert stored["text"] == "final"
    assert stored["tags"] == ["new"]
    assert stored["folderId"] == "archive"


def test_edit_missing_prompt_reports_not_found(
    storage_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main.main(["edit", "ghost", "--folder", "work"]) == 4
    assert "no longer exists" in capsys.readouterr().out


def test_favorite_copy_and_delete(storage_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Favorite toggles, copy prints text and counts a use, delete removes the prompt."""
    _add("Reusable snippet", "p1")
    capsys.readouterr()

    assert main.main(["favorite", "p1"]) == 0
    assert "is now favorite" in capsys.readouterr().out

    assert main.main(["copy", "p1"]) == 0
    assert capsys.readouterr().out.strip() == "Reusable snippet"
    assert _stored(storage_path)[0]["usageCount"] == 1
    assert _stored(storage_path)[0]["favorite"] is True

    assert main.main(["delete", "p1"]) == 0
    assert _stored(storage_path) == []


@pytest.mark.parametrize("command", ["show", "delete", "favorite", "copy"])
def test_missing_prompt_exits_with_not_found(storage_path: Path, command: str) -> None:
    assert main.main([command, "ghost"]) == 5


def test_tags_lists_distinct_sorted_values(
    storage_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _add("one", "p1", "--tag", "zeta", "--tag", "alpha")
    _add("two", "p2", "--tag", "alpha")
    capsys.readouterr()

    assert main.main(["tags"]) == 0

    assert capsys.readouterr().out.splitlines() == ["alpha", "zeta"]


def test_store_init_failure_exits(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """An unusable SQLite location aborts before any command runs."""
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.setenv("PROMPT_SHELF_STORAGE_BACKEND", "sqlite")
    monkeypatch.setenv("PROMPT_SHELF_STORAGE_PATH", str(blocker / "shelf.db"))

    assert main.main(["list"]) == main.EXIT_STORE_INIT


def test_storage_failure_exits_with_storage_code(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.setenv("PROMPT_SHELF_STORAGE_PATH", str(blocker / "prompts.json"))

    assert main.main(["add", "text", "--folder", "work"]) == main.EXIT_STORAGE


def test_memory_backend_runs_without_files(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("PROMPT_SHELF_STORAGE_BACKEND", "memory")

    assert main.main(["add", "ephemeral", "--folder", "work"]) == 0
    assert not (tmp_path / "data").exists()
