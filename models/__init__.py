"""Data models for Prompt Shelf.

Updates: v0.1.0 - 2026-10-10 - Export PromptRecord dataclass.
"""

from .prompt_record import PromptRecord

__all__ = ["PromptRecord"]
