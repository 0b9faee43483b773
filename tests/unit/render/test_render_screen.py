"""Frame composition tests using the plain (colourless) theme."""

from __future__ import annotations

import unittest

from ledit.events import Status
from ledit.render import DIALOG_HINT, clamp_scroll, dialog_lines, render_screen
from ledit.runtime import AppContext
from ledit.state import Mode
from ledit.tree_model import Node, NodeKind, TreeRow, WorkspaceTree, format_tree_row
from ledit.ui_theme import DEFAULT_THEME, PLAIN_THEME, resolve_theme


def _plain_app() -> AppContext:
    return AppContext(theme=PLAIN_THEME)


class RenderScreenTests(unittest.TestCase):
    def test_frame_has_requested_height_with_header_and_explorer(self) -> None:
        app = _plain_app()
        app.state.set_status(Status.error("Command not found!"))

        screen = render_screen(app, 100, 12)

        self.assertEqual(len(screen), 12)
        self.assertIn("Current Mode: Normal Mode", screen[0])
        self.assertIn("Command not found!", screen[0])
        self.assertIn("Explorer", screen[1])
        self.assertIn("Editor", screen[1])
        self.assertTrue(screen[2].startswith("Empty workspace"))

    def test_hidden_explorer_leaves_editor_only(self) -> None:
        app = _plain_app()
        app.state.explorer_visible = False

        screen = render_screen(app, 60, 6)

        self.assertNotIn("Explorer", "".join(screen))
        self.assertTrue(screen[1].startswith(" Editor"))

    def test_command_mode_adds_prompt_with_buffer(self) -> None:
        app = _plain_app()
        app.state.enter_mode(Mode.COMMAND)
        app.state.command_buffer = "open /tmp"

        screen = render_screen(app, 80, 10)

        self.assertEqual(len(screen), 10)
        self.assertIn("Commands", screen[-2])
        self.assertTrue(screen[-1].startswith("> open /tmp"))
        self.assertIn("Command Mode", screen[0])

    def test_dialog_is_overlaid_with_dismiss_hint(self) -> None:
        app = _plain_app()
        app.state.open_dialog("Help for quit command", "Quits the application without saving.\nUsage: quit")

        joined = "\n".join(render_screen(app, 100, 20))

        self.assertIn("Help for quit command", joined)
        self.assertIn("Usage: quit", joined)
        self.assertIn(DIALOG_HINT, joined)

    def test_dialog_hint_uses_hint_color(self) -> None:
        app = AppContext(theme=DEFAULT_THEME)
        app.state.open_dialog("Help for quit command", "Usage: quit")

        screen = render_screen(app, 100, 20)

        hint_line = next(line for line in screen if DIALOG_HINT in line)
        self.assertIn(f"{DEFAULT_THEME.dialog_hint}│", hint_line)
        title_line = next(line for line in screen if "Help for quit command" in line)
        self.assertIn(f"{DEFAULT_THEME.dialog_title}╭", title_line)

    def test_selected_row_scrolls_into_view(self) -> None:
        nodes = [Node(f"file{idx:02d}", None, NodeKind.FILE) for idx in range(30)]
        app = _plain_app()
        app.tree = WorkspaceTree(nodes)
        app.refresh_rows()
        app.selection.select(25)

        screen = render_screen(app, 100, 10)

        self.assertTrue(any(line.startswith("file25") for line in screen))
        self.assertFalse(any(line.startswith("file00") for line in screen))


class RenderHelperTests(unittest.TestCase):
    def test_clamp_scroll_keeps_selection_visible(self) -> None:
        self.assertEqual(clamp_scroll(None, 0, 5, 20), 0)
        self.assertEqual(clamp_scroll(7, 0, 5, 20), 3)
        self.assertEqual(clamp_scroll(2, 6, 5, 20), 2)
        self.assertEqual(clamp_scroll(None, 30, 5, 20), 15)
        self.assertEqual(clamp_scroll(0, 4, 5, 3), 0)

    def test_dialog_lines_share_one_width(self) -> None:
        lines = dialog_lines("Title", "a long body line that needs wrapping inside the box", 20)

        self.assertEqual({len(line) for line in lines}, {20})
        self.assertTrue(lines[0].startswith("╭ Title "))
        self.assertIn(DIALOG_HINT[:18], lines[-2])

    def test_format_tree_row_applies_style_and_selection_colors(self) -> None:
        row = TreeRow(node_id=Node("x", None, NodeKind.FILE).id, text="▶ src", depth=0, kind=NodeKind.DIRECTORY, style="directory")

        plain = format_tree_row(row, 8, theme=PLAIN_THEME)
        colored = format_tree_row(row, 8, theme=DEFAULT_THEME)
        selected = format_tree_row(row, 8, selected=True, theme=DEFAULT_THEME)

        self.assertEqual(plain, "▶ src   ")
        self.assertTrue(colored.startswith(DEFAULT_THEME.tree_dir))
        self.assertTrue(selected.startswith(DEFAULT_THEME.tree_selected))

    def test_resolve_theme_falls_back_to_default(self) -> None:
        self.assertIs(resolve_theme("unknown"), DEFAULT_THEME)
        self.assertEqual(resolve_theme("OCEAN").name, "ocean")
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)


if __name__ == "__main__":
    unittest.main()
