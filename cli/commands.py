"""CLI command handlers for Prompt Shelf.

Updates:
  v0.2.0 - 2026-10-17 - Add copy and tags commands; share one JSON renderer.
  v0.1.0 - 2026-10-16 - Initial list/show/add/edit/delete/favorite handlers.
"""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from core import (
    CollectingErrorReporter,
    MutationOutcome,
    QueryCriteria,
    RecordStore,
    UuidIdGenerator,
    collect_tags,
)

from .utils import format_record_line, format_timestamp, print_and_log

EXIT_OK = 0
EXIT_INVALID = 4
EXIT_NOT_FOUND = 5


@dataclass(slots=True)
class CommandContext:
    """Services shared by command handlers."""

    store: RecordStore
    reporter: CollectingErrorReporter
    default_order: str = "createdAt"


CommandHandler = Callable[[CommandContext, argparse.Namespace, logging.Logger], int]


@dataclass(frozen=True)
class CommandSpec:
    """Metadata for dispatching CLI command handlers."""

    handler: CommandHandler


def _report_failures(context: CommandContext, logger: logging.Logger) -> int:
    for message in context.reporter.drain():
        print_and_log(logger, logging.ERROR, message)
    return EXIT_INVALID


def run_list(context: CommandContext, args: argparse.Namespace, logger: logging.Logger) -> int:
    criteria = QueryCriteria(
        folder=getattr(args, "folder", None),
        text=getattr(args, "text", None),
        favorite=bool(getattr(args, "favorite", False)),
        tag=getattr(args, "tag", None),
        order=getattr(args, "order", None) or context.default_order,
    )
    records = context.store.query(criteria)
    if getattr(args, "json", False):
        print(json.dumps([record.to_record() for record in records], indent=2, ensure_ascii=False))
        return EXIT_OK
    if not records:
        print("No prompts match the given filters.")
        return EXIT_OK
    for record in records:
        print(format_record_line(record))
    logger.debug("Listed %d prompt(s)", len(records))
    return EXIT_OK


def run_show(context: CommandContext, args: argparse.Namespace, logger: logging.Logger) -> int:
    record = context.store.get(args.prompt_id)
    if record is None:
        print_and_log(logger, logging.ERROR, f"Prompt {args.prompt_id} not found")
        return EXIT_NOT_FOUND
    lines = [
        f"Id: {record.id}",
        f"Folder: {record.folder_id or '-'}",
        f"Tags: {', '.join(record.tags) if record.tags else '-'}",
        f"Favorite: {'yes' if record.favorite else 'no'}",
        f"Uses: {record.usage_count}",
        f"Created: {format_timestamp(record.created_at)}",
        f"Updated: {format_timestamp(record.updated_at)}",
        "",
        record.text,
    ]
    print("\n".join(lines))
    return EXIT_OK


def run_add(context: CommandContext, args: argparse.Namespace, logger: logging.Logger) -> int:
    payload: dict[str, Any] = {
        "text": args.text,
        "folderId": getattr(args, "folder", None),
        "tags": list(getattr(args, "tags", None) or []),
        "favorite": bool(getattr(args, "favorite", False)),
        "id": getattr(args, "prompt_id", None) or UuidIdGenerator().new_id(),
    }
    if not context.store.create(payload):
        return _report_failures(context, logger)
    print_and_log(logger, logging.INFO, f"Created prompt {payload['id']}")
    return EXIT_OK


def run_edit(context: CommandContext, args: argparse.Namespace, logger: logging.Logger) -> int:
    patch: dict[str, Any] = {"folderId": getattr(args, "folder", None)}
    if getattr(args, "text", None) is not None:
        patch["text"] = args.text
    if getattr(args, "tags", None) is not None:
        patch["tags"] = list(args.tags)
    if not context.store.update(args.prompt_id, patch):
        return _report_failures(context, logger)
    print_and_log(logger, logging.INFO, f"Updated prompt {args.prompt_id}")
    return EXIT_OK


def _skipped(logger: logging.Logger, prompt_id: str) -> int:
    print_and_log(logger, logging.WARNING, f"Prompt {prompt_id} not found; nothing changed")
    return EXIT_NOT_FOUND


def run_delete(context: CommandContext, args: argparse.Namespace, logger: logging.Logger) -> int:
    if context.store.delete(args.prompt_id) is MutationOutcome.SKIPPED_NOT_FOUND:
        return _skipped(logger, args.prompt_id)
    print_and_log(logger, logging.INFO, f"Deleted prompt {args.prompt_id}")
    return EXIT_OK


def run_favorite(context: CommandContext, args: argparse.Namespace, logger: logging.Logger) -> int:
    if context.store.toggle_favorite(args.prompt_id) is MutationOutcome.SKIPPED_NOT_FOUND:
        return _skipped(logger, args.prompt_id)
    record = context.store.get(args.prompt_id)
    state = "favorite" if record is not None and record.favorite else "not favorite"
    print_and_log(logger, logging.INFO, f"Prompt {args.prompt_id} is now {state}")
    return EXIT_OK


def run_copy(context: CommandContext, args: argparse.Namespace, logger: logging.Logger) -> int:
    if context.store.increment_usage(args.prompt_id) is MutationOutcome.SKIPPED_NOT_FOUND:
        return _skipped(logger, args.prompt_id)
    record = context.store.get(args.prompt_id)
    if record is not None:
        print(record.text)
        logger.info("Prompt %s used %d time(s)", record.id, record.usage_count)
    return EXIT_OK


def run_tags(context: CommandContext, args: argparse.Namespace, logger: logging.Logger) -> int:
    del args
    tags = collect_tags(context.store.snapshot())
    if not tags:
        print("No tags in use.")
        return EXIT_OK
    for tag in tags:
        print(tag)
    logger.debug("Listed %d tag(s)", len(tags))
    return EXIT_OK


COMMAND_SPECS: dict[str, CommandSpec] = {
    "list": CommandSpec(run_list),
    "show": CommandSpec(run_show),
    "add": CommandSpec(run_add),
    "edit": CommandSpec(run_edit),
    "delete": CommandSpec(run_delete),
    "favorite": CommandSpec(run_favorite),
    "copy": CommandSpec(run_copy),
    "tags": CommandSpec(run_tags),
}


__all__ = ["COMMAND_SPECS", "CommandContext", "CommandSpec"]
