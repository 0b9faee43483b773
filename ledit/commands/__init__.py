"""Command layer: command datatype, errors, registry, and built-ins."""

from __future__ import annotations

from .base import (
    Command,
    CommandError,
    CommandHandler,
    CommandNotFoundError,
    ExecutionError,
    InvalidSyntaxError,
)
from .builtin import help_command, open_command, quit_command
from .registry import CommandRegistry, ParsedCommand, register_builtin_commands

__all__ = [
    "Command",
    "CommandHandler",
    "CommandError",
    "CommandNotFoundError",
    "InvalidSyntaxError",
    "ExecutionError",
    "CommandRegistry",
    "ParsedCommand",
    "register_builtin_commands",
    "quit_command",
    "open_command",
    "help_command",
]
