"""Command-line front door for ledit.

Parses CLI options and hands the optional workspace path to the runtime.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .runtime import run_app
from .runtime.config import save_theme_name
from .ui_theme import available_theme_names

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the interactive workspace browser.

    A missing or unreadable PATH does not abort startup; the runtime shows
    the failure on the status bar instead.
    """
    parser = argparse.ArgumentParser(description="Browse a workspace directory tree in the terminal.")
    parser.add_argument("path", nargs="?", default=None, help="Workspace directory to open.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}); remembered for later runs.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Minimum level written to latest.log.",
    )
    args = parser.parse_args(argv)

    if args.theme is not None and args.theme.strip().lower() in available_theme_names():
        save_theme_name(args.theme.strip().lower())

    path = Path(args.path) if args.path is not None else None
    run_app(path, theme_name=args.theme, no_color=args.no_color, log_level=args.log_level)


if __name__ == "__main__":
    main()
