"""Keyboard dispatch facade routing keys by dialog overlay and mode."""

from __future__ import annotations

from ..state import Mode
from .key_command import handle_command_key, handle_insert_key
from .key_normal import KeyContext, handle_normal_key

__all__ = [
    "KeyContext",
    "handle_key",
    "handle_normal_key",
    "handle_command_key",
    "handle_insert_key",
]


def handle_key(key: str, context: KeyContext) -> bool:
    """Handle one key token; return whether any handler consumed it.

    An open dialog swallows every key except ENTER, which dismisses it and
    leaves the mode as it was.
    """
    state = context.state
    if state.dialog_open:
        if key == "ENTER":
            state.close_dialog()
            return True
        return False
    if state.mode is Mode.COMMAND:
        return handle_command_key(key, context)
    if state.mode is Mode.INSERT:
        return handle_insert_key(key, context)
    return handle_normal_key(key, context)
