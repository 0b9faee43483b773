"""Application context and runtime entrypoint.

``AppContext`` owns the workspace tree, the explorer selection, the command
registry, and the event bus. Key handlers and commands reach application
effects only through it or through bus events, never through globals.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..commands import (
    CommandNotFoundError,
    CommandRegistry,
    ExecutionError,
    InvalidSyntaxError,
    register_builtin_commands,
)
from ..events import (
    AppEvent,
    BusClosedError,
    CloseEvent,
    EventBus,
    SetStatusEvent,
    SetWorkspaceEvent,
    ShowDialogEvent,
    Status,
)
from ..input import KeyContext, handle_key, read_key
from ..render import render_screen
from ..selection import SelectionList
from ..state import InteractionState, Mode
from ..tree_model import (
    TreeRow,
    WorkspaceLoadError,
    build_workspace_tree,
    placeholder_tree,
    resolve_workspace_path,
    row_index_of,
)
from ..ui_theme import DEFAULT_THEME, UITheme, resolve_theme
from .config import AppConfig, load_app_config, save_show_hidden
from .logs import setup_logging
from .loop import RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


class AppContext:
    """Explicit application context handed to key handling and the loop."""

    def __init__(
        self,
        config: AppConfig | None = None,
        theme: UITheme | None = None,
        bus: EventBus | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self.theme = theme or DEFAULT_THEME
        self.bus = bus or EventBus()
        self.commands: CommandRegistry = register_builtin_commands(CommandRegistry(self.bus.sender()))
        self.state = InteractionState(
            explorer_visible=self.config.explorer_visible,
            show_hidden=self.config.show_hidden,
        )
        self.workspace: Path | None = None
        self.tree = placeholder_tree()
        self.selection: SelectionList[TreeRow] = SelectionList()
        self.key_context = KeyContext(
            state=self.state,
            move_selection=self.move_selection,
            unselect=self.selection.unselect,
            activate_selection=self.activate_selection,
            toggle_hidden_files=self.toggle_hidden_files,
            submit_command=self.submit_command,
        )
        self.refresh_rows()

    @property
    def rows(self) -> list[TreeRow]:
        return self.selection.items

    def load_workspace(self, path: str | Path | None) -> bool:
        """Rebuild the tree for ``path``.

        On failure the error is shown as status and the tree falls back to
        the "Empty workspace" placeholder.
        """
        if path is None:
            self._reset_workspace()
            return True

        try:
            target = resolve_workspace_path(path)
            tree = build_workspace_tree(target, max_depth=self.config.max_depth)
        except WorkspaceLoadError as exc:
            logger.warning("%s", exc)
            self._reset_workspace()
            self.state.set_status(Status.error(str(exc)))
            return False

        self.workspace = target
        self.tree = tree
        self.selection.unselect()
        self.refresh_rows()
        self.state.set_status(Status.info(f"Opened {target}"))
        return True

    def _reset_workspace(self) -> None:
        self.workspace = None
        self.tree = placeholder_tree()
        self.selection.unselect()
        self.refresh_rows()

    def refresh_rows(self) -> None:
        """Re-flatten the tree, keeping the cursor on the same node when visible."""
        current = self.selection.selected_item()
        self.selection.replace_items(self.tree.flatten(show_hidden=self.state.show_hidden))
        if current is not None:
            idx = row_index_of(current.node_id, self.selection.items)
            if idx is not None:
                self.selection.select(idx)
        self.state.dirty = True

    def move_selection(self, direction: int) -> None:
        if direction > 0:
            self.selection.next()
        else:
            self.selection.previous()

    def activate_selection(self) -> None:
        """Toggle expansion of the node under the cursor."""
        row = self.selection.selected_item()
        if row is None:
            return
        if self.tree.toggle_expand(row.node_id):
            self.refresh_rows()

    def toggle_hidden_files(self) -> None:
        self.state.show_hidden = not self.state.show_hidden
        save_show_hidden(self.state.show_hidden)
        self.refresh_rows()
        label = "shown" if self.state.show_hidden else "hidden"
        self.state.set_status(Status.info(f"Hidden files {label}"))

    def submit_command(self, line: str) -> None:
        """Parse and run ``line``, reporting any failure on the status bar."""
        try:
            self.commands.run(line)
        except CommandNotFoundError as exc:
            logger.info("Unknown command %r", exc.token)
            self.state.set_status(Status.error("Command not found!"))
        except InvalidSyntaxError as exc:
            self.state.set_status(Status.error(f"Invalid syntax! Type `help {exc.command_name}`"))
        except ExecutionError as exc:
            logger.error("Command %r failed: %s", line, exc)
            self.state.set_status(Status.error(exc.reason or "Command failed"))

    def handle_key(self, key: str) -> bool:
        return handle_key(key, self.key_context)

    def apply_event(self, event: AppEvent) -> None:
        logger.debug("Applying %r", event)
        if isinstance(event, CloseEvent):
            self.state.should_close = True
        elif isinstance(event, ShowDialogEvent):
            self.state.open_dialog(event.title, event.body)
            self.state.enter_mode(Mode.NORMAL)
        elif isinstance(event, SetStatusEvent):
            self.state.set_status(event.status)
        elif isinstance(event, SetWorkspaceEvent):
            self.load_workspace(event.path)

    def drain_events(self) -> bool:
        """Apply at most one pending bus event; return whether one was applied."""
        try:
            event = self.bus.poll()
        except BusClosedError as exc:
            text = f"Error receiving application events: {exc}"
            if self.state.status.text != text:
                logger.error("%s", text)
                self.state.set_status(Status.error(text))
            return False
        if event is None:
            return False
        self.apply_event(event)
        return True


def run_app(
    path: Path | None,
    theme_name: str | None = None,
    no_color: bool = False,
    log_level: str = "INFO",
) -> None:
    """Configure logging, load the workspace, and run the interactive loop."""
    config = load_app_config()
    log_file = setup_logging(config.log_dir, log_level)
    logger.info("Starting ledit (log file: %s)", log_file)

    if not sys.stdin.isatty():
        raise SystemExit("ledit needs an interactive terminal on stdin.")

    theme = resolve_theme(theme_name or config.theme, no_color=no_color)
    app = AppContext(config=config, theme=theme)
    if path is not None:
        app.load_workspace(path)

    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    run_main_loop(app, terminal, stdin_fd, RuntimeLoopTiming(), read_key=read_key, render=render_screen)
    app.bus.close()
    logger.info("ledit closed")
