"""Terminal mode and cursor handling for the selector."""

import io
import os
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from gitrecent.utils.constants import Ansi
from gitrecent.utils.debug import debug_terminal, mute_stderr

try:
    import termios
    import tty
except ImportError:  # Windows
    termios = None
    tty = None


def stdin_fd() -> Optional[int]:
    """File descriptor of stdin, or None when stdin is not a real file."""
    try:
        return sys.stdin.fileno()
    except (AttributeError, ValueError, io.UnsupportedOperation):
        return None


class RawModeGuard:
    """Holds the terminal in raw, no-echo mode between acquire and release.

    Use as a context manager so the saved mode is restored on every exit
    path. Without termios, or when stdin is not a TTY, both calls are
    no-ops.
    """

    def __init__(self, fd: Optional[int] = None):
        self.fd = stdin_fd() if fd is None else fd
        self._saved: Optional[list] = None

    @property
    def active(self) -> bool:
        return self._saved is not None

    def acquire(self) -> bool:
        """Enter raw mode. Returns True if the mode was changed.

        Failure is logged and otherwise ignored; selection still works,
        only with echo and line buffering.
        """
        if self.active:
            return True
        if termios is None:
            debug_terminal("termios unavailable, raw mode skipped")
            return False
        if self.fd is None or not os.isatty(self.fd):
            debug_terminal("stdin is not a tty, raw mode skipped", fd=self.fd)
            return False

        try:
            saved = termios.tcgetattr(self.fd)
            tty.setraw(self.fd, when=termios.TCSANOW)
        except (termios.error, OSError) as e:
            debug_terminal("Failed to enter raw mode", error=e)
            return False

        self._saved = saved
        mute_stderr(True)
        debug_terminal("Raw mode on", fd=self.fd)
        return True

    def release(self) -> None:
        """Restore the saved mode. Safe to call more than once."""
        saved, self._saved = self._saved, None
        if saved is None:
            return
        try:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, saved)
        except (termios.error, OSError) as e:
            debug_terminal("Failed to restore terminal mode", error=e)
        finally:
            mute_stderr(False)
        debug_terminal("Raw mode off", fd=self.fd)

    def __enter__(self) -> "RawModeGuard":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


def hide_cursor(out: TextIO) -> None:
    out.write(Ansi.HIDE_CURSOR)
    out.flush()


def show_cursor(out: TextIO) -> None:
    out.write(Ansi.SHOW_CURSOR)
    out.flush()


@contextmanager
def interactive_terminal(
    out: TextIO, guard: Optional[RawModeGuard] = None
) -> Iterator[RawModeGuard]:
    """Raw mode plus hidden cursor for the body of the block.

    On exit the mode is restored first, then the cursor shown, before
    control returns to the caller.
    """
    guard = guard or RawModeGuard()
    guard.acquire()
    try:
        hide_cursor(out)
        yield guard
    finally:
        guard.release()
        show_cursor(out)
