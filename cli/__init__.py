"""Command-line interface for Prompt Shelf.

Updates: v0.1.0 - 2026-10-16 - Package scaffold for parser, commands, and runtime helpers.
"""
