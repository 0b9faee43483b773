"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the explorer, status bar, command bar, and
dialog. Row style hints from the tree model map onto these fields.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    pane_active: str
    pane_inactive: str
    tree_dir: str
    tree_file: str
    tree_hidden: str
    tree_info: str
    tree_selected: str
    mode_bar: str
    status_info: str
    status_warning: str
    status_error: str
    command_prompt: str
    dialog_title: str
    dialog_border: str
    dialog_hint: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    pane_active="\033[94m",
    pane_inactive="\033[37m",
    tree_dir="\033[1;34m",
    tree_file="\033[92m",
    tree_hidden="\033[2;38;5;250m",
    tree_info="\033[3;38;5;250m",
    tree_selected="\033[1;30;47m",
    mode_bar="\033[1;97;44m",
    status_info="\033[1;92;44m",
    status_warning="\033[1;93;44m",
    status_error="\033[1;91;44m",
    command_prompt="\033[94m",
    dialog_title="\033[1;31m",
    dialog_border="\033[31m",
    dialog_hint="\033[2m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    pane_active="\033[38;5;39m",
    pane_inactive="\033[2;38;5;110m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;117m",
    tree_hidden="\033[2;38;5;110m",
    tree_info="\033[3;38;5;153m",
    tree_selected="\033[1;38;5;16;48;5;153m",
    mode_bar="\033[1;38;5;231;48;5;24m",
    status_info="\033[1;38;5;84;48;5;24m",
    status_warning="\033[1;38;5;215;48;5;24m",
    status_error="\033[1;38;5;203;48;5;24m",
    command_prompt="\033[38;5;45m",
    dialog_title="\033[1;38;5;39m",
    dialog_border="\033[38;5;39m",
    dialog_hint="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    pane_active="",
    pane_inactive="",
    tree_dir="",
    tree_file="",
    tree_hidden="",
    tree_info="",
    tree_selected="",
    mode_bar="",
    status_info="",
    status_warning="",
    status_error="",
    command_prompt="",
    dialog_title="",
    dialog_border="",
    dialog_hint="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
