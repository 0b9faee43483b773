"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle, alternate-screen switching, and frame output.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty


class TerminalController:
    """Manage terminal mode transitions and frame writes."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Show the cursor and restore the main screen and tty settings."""
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def size(self) -> tuple[int, int]:
        """Return ``(columns, lines)`` with an 80x24 fallback."""
        term = shutil.get_terminal_size((80, 24))
        return term.columns, term.lines

    def write_frame(self, lines: list[str]) -> None:
        """Redraw the whole screen from the top-left corner."""
        payload = "\x1b[H" + "\r\n".join(f"{line}\x1b[K" for line in lines) + "\x1b[J"
        os.write(self.stdout_fd, payload.encode("utf-8"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
