"""Command registry and line dispatcher.

Lookup walks commands in registration order, checking each primary name
and then its aliases; the first match wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..events import EventSender
from .base import Command, CommandNotFoundError
from .builtin import help_command, open_command, quit_command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedCommand:
    """Resolved command with its arguments and a sender to publish on."""

    command: Command
    args: list[str] = field(default_factory=list)
    sender: EventSender | None = None


class CommandRegistry:
    """Ordered command table bound to one event sender."""

    def __init__(self, sender: EventSender) -> None:
        self._sender = sender
        self._commands: list[Command] = []

    @property
    def commands(self) -> tuple[Command, ...]:
        return tuple(self._commands)

    def register(self, command: Command) -> CommandRegistry:
        """Append ``command`` and return ``self`` for fluent usage."""
        self._commands.append(command)
        return self

    def register_many(self, *commands: Command) -> CommandRegistry:
        for command in commands:
            self.register(command)
        return self

    def find(self, token: str) -> Command | None:
        for command in self._commands:
            if command.matches(token):
                return command
        return None

    def parse(self, line: str) -> ParsedCommand:
        """Split ``line`` on whitespace and resolve its first token.

        Raises ``CommandNotFoundError`` when nothing matches, including for
        an empty line.
        """
        tokens = line.split()
        if not tokens:
            raise CommandNotFoundError("")
        command = self.find(tokens[0])
        if command is None:
            raise CommandNotFoundError(tokens[0])
        return ParsedCommand(command=command, args=tokens[1:], sender=self._sender)

    def execute(self, parsed: ParsedCommand) -> None:
        """Run a parsed command; command errors propagate to the caller."""
        sender = parsed.sender if parsed.sender is not None else self._sender
        logger.info("Executing command %s %s", parsed.command.name, parsed.args)
        parsed.command.execute(sender, list(parsed.args))

    def run(self, line: str) -> Command:
        """Parse and execute ``line``, returning the command that ran."""
        parsed = self.parse(line)
        self.execute(parsed)
        return parsed.command


def register_builtin_commands(registry: CommandRegistry) -> CommandRegistry:
    """Register quit and open, then help composed from them."""
    registry.register_many(quit_command(), open_command())
    return registry.register(help_command(registry.commands))
