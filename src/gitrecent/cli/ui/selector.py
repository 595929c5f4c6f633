"""Interactive branch selector loop."""

import sys
from enum import Enum
from typing import Optional, TextIO

from gitrecent.cli.ui.render import render
from gitrecent.cli.ui.terminal import RawModeGuard, interactive_terminal
from gitrecent.core.keys import KeyEvent, KeyReader
from gitrecent.core.model import ListModel
from gitrecent.utils.constants import TITLE


class SelectionState(Enum):
    RUNNING = "running"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class SelectionController:
    """Render, read a key, apply it; until confirm or cancel.

    Reader, output stream and guard can be swapped out so the loop runs
    without a real terminal.
    """

    def __init__(
        self,
        model: ListModel,
        reader: Optional[KeyReader] = None,
        out: Optional[TextIO] = None,
        guard: Optional[RawModeGuard] = None,
        title: str = TITLE,
    ):
        self.model = model
        self.reader = reader or KeyReader()
        self.out = out or sys.stdout
        self.guard = guard or RawModeGuard(self.reader.fd)
        self.title = title
        self.state = SelectionState.RUNNING

    def apply(self, event: KeyEvent) -> SelectionState:
        """Apply one event to the model and return the new state."""
        if self.state is not SelectionState.RUNNING:
            return self.state

        if event is KeyEvent.NAVIGATE_UP:
            self.model.navigate_up()
        elif event is KeyEvent.NAVIGATE_DOWN:
            self.model.navigate_down()
        elif event is KeyEvent.CONFIRM:
            self.state = SelectionState.CONFIRMED
        elif event in (KeyEvent.CANCEL, KeyEvent.END_OF_INPUT):
            self.state = SelectionState.CANCELLED
        return self.state

    def draw(self) -> None:
        for line in render(self.model, self.title):
            self.out.write(line)
        self.out.flush()

    def run(self) -> Optional[str]:
        """Run the loop. Returns the chosen branch, or None if cancelled.

        The terminal is back in its original mode with the cursor visible
        by the time this returns or raises.
        """
        with interactive_terminal(self.out, self.guard):
            while self.state is SelectionState.RUNNING:
                self.draw()
                self.apply(self.reader.read_event())

        if self.state is SelectionState.CONFIRMED:
            return self.model.selected_item
        return None
