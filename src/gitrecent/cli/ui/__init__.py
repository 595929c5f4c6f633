"""UI components for the interactive selector."""

from gitrecent.cli.ui.console import console, err_console, print_error, write_raw
from gitrecent.cli.ui.render import render
from gitrecent.cli.ui.selector import SelectionController, SelectionState
from gitrecent.cli.ui.terminal import RawModeGuard, interactive_terminal

__all__ = [
    "RawModeGuard",
    "SelectionController",
    "SelectionState",
    "console",
    "err_console",
    "interactive_terminal",
    "print_error",
    "render",
    "write_raw",
]
