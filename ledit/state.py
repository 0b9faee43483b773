"""Interaction state shared by key handlers, the event applier, and renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .events import Status


class Mode(Enum):
    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} Mode"


@dataclass
class InteractionState:
    """Mode plus the overlays and flags layered on top of it.

    ``dialog_open`` is orthogonal to ``mode``: while set, only dialog
    dismissal is handled and the mode is left untouched.
    """

    mode: Mode = Mode.NORMAL
    command_buffer: str = ""
    dialog_open: bool = False
    dialog_title: str = ""
    dialog_body: str = ""
    explorer_visible: bool = True
    show_hidden: bool = True
    should_close: bool = False
    status: Status = field(default_factory=Status)
    explorer_start: int = 0
    dirty: bool = True

    def enter_mode(self, mode: Mode) -> None:
        if mode is Mode.COMMAND:
            self.command_buffer = ""
        self.mode = mode
        self.dirty = True

    def open_dialog(self, title: str, body: str) -> None:
        self.dialog_open = True
        self.dialog_title = title
        self.dialog_body = body
        self.dirty = True

    def close_dialog(self) -> None:
        self.dialog_open = False
        self.dirty = True

    def set_status(self, status: Status) -> None:
        self.status = status
        self.dirty = True
