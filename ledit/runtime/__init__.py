"""Runtime package: application context, main loop, terminal, config, logging."""

from __future__ import annotations

from .app import AppContext, run_app
from .loop import RuntimeLoopTiming, normalize_enter, run_main_loop
from .terminal import TerminalController

__all__ = [
    "AppContext",
    "run_app",
    "RuntimeLoopTiming",
    "normalize_enter",
    "run_main_loop",
    "TerminalController",
]
