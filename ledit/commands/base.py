"""Command datatype and the command error taxonomy."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..events import EventSender

CommandHandler = Callable[[EventSender, list[str]], None]


class CommandError(Exception):
    """Base class for dispatcher and command failures."""


class CommandNotFoundError(CommandError):
    """No registered command name or alias matches the typed token."""

    def __init__(self, token: str) -> None:
        super().__init__(f"command not found: {token!r}")
        self.token = token


class InvalidSyntaxError(CommandError):
    """Arguments do not match what the command accepts."""

    def __init__(self, command_name: str) -> None:
        super().__init__(f"invalid syntax for {command_name!r}")
        self.command_name = command_name


class ExecutionError(CommandError):
    """A command's side effect could not be completed."""

    def __init__(self, reason: str | None = None) -> None:
        super().__init__(reason or "command execution failed")
        self.reason = reason


@dataclass(frozen=True)
class Command:
    """Named, aliased command whose handler publishes events through a sender.

    Handlers validate their own arguments and raise ``InvalidSyntaxError``
    or ``ExecutionError``; success has no return value.
    """

    name: str
    aliases: tuple[str, ...]
    description: str
    handler: CommandHandler

    def matches(self, token: str) -> bool:
        """Return whether ``token`` is this command's name or one of its aliases."""
        return token == self.name or token in self.aliases

    def execute(self, sender: EventSender, args: list[str]) -> None:
        self.handler(sender, args)
