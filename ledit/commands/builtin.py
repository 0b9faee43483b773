"""Built-in commands: quit, open, and help."""

from __future__ import annotations

from collections.abc import Iterable

from ..events import (
    AppEvent,
    BusClosedError,
    CloseEvent,
    EventSender,
    SetStatusEvent,
    SetWorkspaceEvent,
    ShowDialogEvent,
    Status,
)
from .base import Command, ExecutionError, InvalidSyntaxError

QUIT_DESCRIPTION = "Quits the application without saving.\nUsage: quit"
OPEN_DESCRIPTION = "Set the current workspace to the given one.\nUsage: open <directory>"
HELP_DESCRIPTION = "Get help for the given command\nUsage: help <command name>"
NO_DESCRIPTION = "No description provided :("


def _send(sender: EventSender, event: AppEvent, what: str) -> None:
    """Publish ``event`` and translate a closed bus into ``ExecutionError``."""
    try:
        sender.send(event)
    except BusClosedError as exc:
        raise ExecutionError(f"Error while sending the {what} event to the application") from exc


def quit_command() -> Command:
    def handler(sender: EventSender, _args: list[str]) -> None:
        _send(sender, CloseEvent(), "quit")

    return Command("quit", ("q",), QUIT_DESCRIPTION, handler)


def open_command() -> Command:
    def handler(sender: EventSender, args: list[str]) -> None:
        if len(args) != 1:
            raise InvalidSyntaxError("open")
        _send(sender, SetWorkspaceEvent(args[0]), "workspace")

    return Command("open", ("o",), OPEN_DESCRIPTION, handler)


def help_command(commands: Iterable[Command]) -> Command:
    """Build ``help`` from descriptions of the commands registered so far.

    Commands registered after this call are not described by it.
    """
    descriptions = {command.name: command.description for command in commands}
    descriptions["help"] = HELP_DESCRIPTION

    def handler(sender: EventSender, args: list[str]) -> None:
        if len(args) != 1:
            raise InvalidSyntaxError("help")
        name = args[0]
        if name not in descriptions:
            _send(sender, SetStatusEvent(Status.error(f"{name} command doesn't exist")), "status")
            return
        body = descriptions[name] or NO_DESCRIPTION
        _send(sender, ShowDialogEvent(f"Help for {name} command", body), "dialog")

    return Command("help", ("h",), HELP_DESCRIPTION, handler)
