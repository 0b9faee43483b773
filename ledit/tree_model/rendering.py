"""Formatting helpers for tree rows."""

from __future__ import annotations

from ..ui_theme import DEFAULT_THEME, UITheme
from .types import Node, NodeKind, TreeRow

INDENT = "   "
EXPANDED_GLYPH = "▼ "
COLLAPSED_GLYPH = "▶ "


def row_text(node: Node) -> str:
    """Return indentation + expand glyph + display name for ``node``."""
    if node.expanded is True:
        glyph = EXPANDED_GLYPH
    elif node.expanded is False:
        glyph = COLLAPSED_GLYPH
    else:
        glyph = ""
    return f"{INDENT * node.depth}{glyph}{node.display_name}"


def row_style(node: Node) -> str:
    """Return the style hint a renderer uses to colour ``node``."""
    if node.kind is NodeKind.INFO:
        return "info"
    if node.is_hidden:
        return "hidden"
    if node.kind is NodeKind.DIRECTORY:
        return "directory"
    return "file"


def style_color(style: str, theme: UITheme | None = None) -> str:
    """Map a row style hint onto an ANSI color from ``theme``."""
    active_theme = theme or DEFAULT_THEME
    return {
        "directory": active_theme.tree_dir,
        "hidden": active_theme.tree_hidden,
        "info": active_theme.tree_info,
    }.get(style, active_theme.tree_file)


def format_tree_row(row: TreeRow, width: int, selected: bool = False, theme: UITheme | None = None) -> str:
    """Render one row as ANSI text padded or clipped to ``width`` cells."""
    active_theme = theme or DEFAULT_THEME
    text = row.text[:width].ljust(width) if width > 0 else ""
    if selected:
        return f"{active_theme.tree_selected}{text}{active_theme.reset}"
    return f"{style_color(row.style, active_theme)}{text}{active_theme.reset}"
