"""Frame composition for the terminal UI.

Turns application state into one ANSI string per screen line: header,
explorer and editor panes, command bar, and an optional centred dialog.
Helpers here are presentation-only and side-effect free apart from the
explorer scroll offset kept on the interaction state.
"""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

from .events import StatusLevel
from .state import Mode
from .tree_model import format_tree_row
from .ui_theme import UITheme

if TYPE_CHECKING:
    from .runtime.app import AppContext

DIALOG_HINT = "Press <ENTER> to close"
PANE_DIVIDER = "│"


def fit(text: str, width: int) -> str:
    """Clip or pad plain ``text`` to exactly ``width`` cells."""
    if width <= 0:
        return ""
    return text[:width].ljust(width)


def explorer_width(columns: int) -> int:
    """Explorer pane takes a fifth of the screen, within sane bounds."""
    return max(12, min(columns - 2, columns // 5))


def clamp_scroll(selected: int | None, start: int, visible: int, total: int) -> int:
    """Return a scroll offset that keeps ``selected`` inside the viewport."""
    visible = max(1, visible)
    if selected is not None:
        if selected < start:
            start = selected
        elif selected >= start + visible:
            start = selected - visible + 1
    return max(0, min(start, max(0, total - visible)))


def status_color(level: StatusLevel, theme: UITheme) -> str:
    if level is StatusLevel.ERROR:
        return theme.status_error
    if level is StatusLevel.WARNING:
        return theme.status_warning
    return theme.status_info


def render_header(app: AppContext, columns: int) -> str:
    theme = app.theme
    mode_text = f" Current Mode: {app.state.mode.label} "
    mode_width = min(columns, max(len(mode_text), columns // 5))
    status = app.state.status
    status_text = fit(f" {status.text}", columns - mode_width)
    return (
        f"{theme.mode_bar}{fit(mode_text, mode_width)}{theme.reset}"
        f"{status_color(status.level, theme)}{status_text}{theme.reset}"
    )


def render_panes(app: AppContext, columns: int, height: int) -> list[str]:
    """Render the title row plus ``height - 1`` pane rows."""
    theme = app.theme
    state = app.state
    editor_color = theme.pane_active if state.mode is Mode.INSERT else theme.pane_inactive
    if not state.explorer_visible:
        out = [f"{editor_color}{fit(' Editor', columns)}{theme.reset}"]
        out.extend("" for _ in range(max(0, height - 1)))
        return out

    left = explorer_width(columns)
    right = max(0, columns - left - 1)
    explorer_color = theme.pane_active if state.mode is Mode.NORMAL else theme.pane_inactive
    out = [
        f"{explorer_color}{fit(' Explorer', left)}{theme.reset}"
        f"{theme.pane_inactive}{PANE_DIVIDER}{theme.reset}"
        f"{editor_color}{fit(' Editor', right)}{theme.reset}"
    ]

    visible = max(1, height - 1)
    rows = app.rows
    selected = app.selection.selected
    state.explorer_start = clamp_scroll(selected, state.explorer_start, visible, len(rows))
    for offset in range(visible):
        idx = state.explorer_start + offset
        if idx < len(rows):
            cell = format_tree_row(rows[idx], left, selected=idx == selected, theme=theme)
        else:
            cell = " " * left
        out.append(f"{cell}{theme.pane_inactive}{PANE_DIVIDER}{theme.reset}")
    return out[:height]


def render_command_bar(app: AppContext, columns: int) -> list[str]:
    theme = app.theme
    return [
        f"{theme.pane_active}{fit(' Commands', columns)}{theme.reset}",
        f"{theme.command_prompt}>{theme.reset} {fit(app.state.command_buffer, columns - 2)}",
    ]


def dialog_lines(title: str, body: str, width: int) -> list[str]:
    """Return plain-text box lines (borders included) for a dialog."""
    inner = max(1, width - 2)
    wrapped: list[str] = []
    for paragraph in body.splitlines() or [""]:
        wrapped.extend(textwrap.wrap(paragraph, inner) or [""])
    title_text = f" {title} "[:inner]
    lines = ["╭" + title_text + "─" * (inner - len(title_text)) + "╮"]
    lines.extend("│" + line.center(inner)[:inner] + "│" for line in wrapped)
    lines.append("│" + " " * inner + "│")
    lines.append("│" + DIALOG_HINT.center(inner)[:inner] + "│")
    lines.append("╰" + "─" * inner + "╯")
    return lines


def overlay_dialog(app: AppContext, screen: list[str], columns: int) -> list[str]:
    """Replace the centre rows of ``screen`` with the open dialog box."""
    theme = app.theme
    width = max(8, min(columns, columns // 2))
    box = dialog_lines(app.state.dialog_title, app.state.dialog_body, width)
    hint_row = len(box) - 2
    box = box[: len(screen)]
    top = max(0, (len(screen) - len(box)) // 2)
    left_pad = " " * max(0, (columns - width) // 2)
    for offset, line in enumerate(box):
        if offset == 0:
            color = theme.dialog_title
        elif offset == hint_row:
            color = theme.dialog_hint
        else:
            color = theme.dialog_border
        screen[top + offset] = f"{left_pad}{color}{line}{theme.reset}"
    return screen


def render_screen(app: AppContext, columns: int, lines: int) -> list[str]:
    """Compose one full frame of ``lines`` rows."""
    columns = max(1, columns)
    lines = max(2, lines)
    command_rows = render_command_bar(app, columns) if app.state.mode is Mode.COMMAND else []
    pane_height = max(1, lines - 1 - len(command_rows))
    screen = [render_header(app, columns)]
    screen.extend(render_panes(app, columns, pane_height))
    screen.extend(command_rows)
    screen = screen[:lines]
    if app.state.dialog_open:
        screen = overlay_dialog(app, screen, columns)
    return screen
