"""Argument parser for Prompt Shelf CLI.

Updates:
  v0.2.1 - 2026-10-19 - Add --log-level option.
  v0.2.0 - 2026-10-17 - Add copy and tags subcommands.
  v0.1.0 - 2026-10-16 - Initial record management subcommands.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    """Return the configured argument parser."""
    parser = argparse.ArgumentParser(description="Prompt Shelf snippet manager")
    parser.add_argument(
        "--logging-config",
        type=Path,
        default=None,
        help="Path to logging configuration file (INI format)",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        type=str.upper,
        default=None,
        help="Root log level (overrides the logging configuration).",
    )
    parser.add_argument(
        "--print-settings",
        action="store_true",
        help="Print resolved settings and exit",
    )

    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="List stored prompts.")
    list_parser.add_argument("--folder", default=None, help="Only show prompts in this folder.")
    list_parser.add_argument(
        "--text",
        default=None,
        help="Case-insensitive substring the prompt text must contain.",
    )
    list_parser.add_argument(
        "--favorite",
        action="store_true",
        help="Only show favorite prompts.",
    )
    list_parser.add_argument("--tag", default=None, help="Only show prompts carrying this tag.")
    list_parser.add_argument(
        "--order",
        choices=("createdAt", "updatedAt", "usage"),
        default=None,
        help="Sort order (defaults to the configured default_order).",
    )
    list_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the matching prompts as a JSON array.",
    )

    show_parser = subparsers.add_parser("show", help="Show a single prompt.")
    show_parser.add_argument("prompt_id", help="Prompt identifier.")

    add_parser = subparsers.add_parser("add", help="Create a prompt.")
    add_parser.add_argument("text", help="Prompt text.")
    add_parser.add_argument("--folder", default=None, help="Folder id (required).")
    add_parser.add_argument(
        "--tag",
        dest="tags",
        action="append",
        default=None,
        help="Tag to attach; repeat for several tags.",
    )
    add_parser.add_argument("--id", dest="prompt_id", default=None, help="Explicit prompt id.")
    add_parser.add_argument("--favorite", action="store_true", help="Mark as favorite.")

    edit_parser = subparsers.add_parser("edit", help="Update a prompt.")
    edit_parser.add_argument("prompt_id", help="Prompt identifier.")
    edit_parser.add_argument("--folder", default=None, help="Folder id (required).")
    edit_parser.add_argument("--text", default=None, help="Replacement prompt text.")
    edit_parser.add_argument(
        "--tag",
        dest="tags",
        action="append",
        default=None,
        help="Replacement tag list; repeat for several tags.",
    )

    for name, help_text in (
        ("delete", "Delete a prompt."),
        ("favorite", "Toggle the favorite flag of a prompt."),
        ("copy", "Print a prompt's text and record one use."),
    ):
        command_parser = subparsers.add_parser(name, help=help_text)
        command_parser.add_argument("prompt_id", help="Prompt identifier.")

    subparsers.add_parser("tags", help="List distinct tags across all prompts.")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return parsed CLI arguments for the Prompt Shelf launcher."""
    return build_parser().parse_args(argv)


__all__ = ["build_parser", "parse_args"]
