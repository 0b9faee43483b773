"""Command-line and insert-mode keyboard handling."""

from __future__ import annotations

from ..state import Mode
from .key_normal import KeyContext


def handle_command_key(key: str, context: KeyContext) -> bool:
    """Edit the command buffer, submitting it on ENTER."""
    state = context.state
    if key == "ESC":
        state.enter_mode(Mode.NORMAL)
        state.command_buffer = ""
        return True
    if key == "ENTER":
        line = state.command_buffer
        if line.strip():
            context.submit_command(line)
            state.command_buffer = ""
        state.dirty = True
        return True
    if key == "BACKSPACE":
        state.command_buffer = state.command_buffer[:-1]
        state.dirty = True
        return True
    if len(key) == 1 and key.isprintable():
        state.command_buffer += key
        state.dirty = True
        return True
    return False


def handle_insert_key(key: str, context: KeyContext) -> bool:
    """Insert mode only listens for ESC; text editing lives elsewhere."""
    if key == "ESC":
        context.state.enter_mode(Mode.NORMAL)
        return True
    return False
