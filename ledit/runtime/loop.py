"""Main interactive event loop for the terminal UI.

Each tick renders when something changed, waits up to one tick for a key,
dispatches it, then applies at most one pending bus event.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .app import AppContext


class LoopTerminal(Protocol):
    def raw_mode(self): ...

    def size(self) -> tuple[int, int]: ...

    def write_frame(self, lines: list[str]) -> None: ...


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    tick_ms: int = 120


def normalize_enter(key: str, skip_next_lf: bool) -> tuple[str, bool]:
    """Fold CR, LF, and CRLF into one ``ENTER`` token.

    Returns ``(key, skip_next_lf)``; a skipped LF comes back as ``""``.
    """
    if skip_next_lf and key == "ENTER_LF":
        return "", False
    if key == "ENTER_CR":
        return "ENTER", True
    if key == "ENTER_LF":
        return "ENTER", False
    return key, False


def run_main_loop(
    app: AppContext,
    terminal: LoopTerminal,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    *,
    read_key: Callable[..., str],
    render: Callable[[AppContext, int, int], list[str]],
) -> None:
    """Run until ``app.state.should_close`` is set.

    The flag is checked at the top of each iteration, so the iteration that
    sets it still finishes draining its bus event.
    """
    state = app.state
    skip_next_lf = False
    last_size: tuple[int, int] | None = None
    with terminal.raw_mode():
        while not state.should_close:
            size = terminal.size()
            if state.dirty or size != last_size:
                columns, lines = size
                terminal.write_frame(render(app, columns, lines))
                state.dirty = False
                last_size = size

            key = read_key(stdin_fd, timeout_ms=timing.tick_ms)
            if key:
                key, skip_next_lf = normalize_enter(key, skip_next_lf)
            if key:
                app.handle_key(key)
            app.drain_events()
