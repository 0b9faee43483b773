"""Normal-mode keyboard handling."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..state import InteractionState, Mode
from .key_registry import KeyComboBinding, KeyComboRegistry


@dataclass(frozen=True)
class KeyContext:
    """State and bound operations required by the mode key handlers."""

    state: InteractionState
    move_selection: Callable[[int], None]
    unselect: Callable[[], None]
    activate_selection: Callable[[], None]
    toggle_hidden_files: Callable[[], None]
    submit_command: Callable[[str], None]


def handle_normal_key(key: str, context: KeyContext) -> bool:
    """Handle one normal-mode key; return whether it was consumed."""
    state = context.state

    def quit_action() -> None:
        state.should_close = True

    def toggle_explorer_action() -> None:
        state.explorer_visible = not state.explorer_visible
        state.dirty = True

    def explorer_only(action: Callable[[], None]) -> Callable[[], None]:
        """Wrap a tree action so it is ignored while the explorer is hidden."""

        def run() -> None:
            if state.explorer_visible:
                action()
                state.dirty = True

        return run

    bindings = KeyComboRegistry().register_bindings(
        KeyComboBinding(("q",), quit_action),
        KeyComboBinding(("f",), toggle_explorer_action),
        KeyComboBinding(("c", ":"), lambda: state.enter_mode(Mode.COMMAND)),
        KeyComboBinding(("i",), lambda: state.enter_mode(Mode.INSERT)),
        KeyComboBinding(("DOWN", "j"), explorer_only(lambda: context.move_selection(1))),
        KeyComboBinding(("UP", "k"), explorer_only(lambda: context.move_selection(-1))),
        KeyComboBinding(("LEFT",), explorer_only(context.unselect)),
        KeyComboBinding(("RIGHT", "l", "ENTER"), explorer_only(context.activate_selection)),
        KeyComboBinding((".",), context.toggle_hidden_files),
    )
    return bindings.dispatch(key)
