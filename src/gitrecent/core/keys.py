"""Raw keystroke decoding.

Input arrives as chunks of at most three bytes. Arrow keys come in
atomically as ``ESC [ A`` style sequences, so a chunk holding a single
ESC is a standalone Escape press.
"""

import io
import os
import sys
from enum import Enum
from typing import BinaryIO, Optional

import readchar

from gitrecent.utils.constants import KEY_CHUNK_SIZE
from gitrecent.utils.debug import debug_keys


class KeyEvent(Enum):
    """Logical events produced from raw input."""

    NAVIGATE_UP = "up"
    NAVIGATE_DOWN = "down"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    IGNORE = "ignore"
    # Stream closed; ends the loop like CANCEL but is not a keypress
    END_OF_INPUT = "eof"


ESC = ord(readchar.key.ESC)

# First byte -> event, for everything except ESC
SINGLE_BYTE_EVENTS: dict[int, KeyEvent] = {
    ord("k"): KeyEvent.NAVIGATE_UP,
    ord("w"): KeyEvent.NAVIGATE_UP,
    ord("j"): KeyEvent.NAVIGATE_DOWN,
    ord("s"): KeyEvent.NAVIGATE_DOWN,
    ord(readchar.key.LF): KeyEvent.CONFIRM,
    ord(readchar.key.CR): KeyEvent.CONFIRM,
    ord(readchar.key.SPACE): KeyEvent.CONFIRM,
    ord("q"): KeyEvent.CANCEL,
    ord("Q"): KeyEvent.CANCEL,
}

# Final byte of a three byte escape sequence -> event
ESCAPE_SEQUENCE_EVENTS: dict[int, KeyEvent] = {
    ord("A"): KeyEvent.NAVIGATE_UP,
    ord("B"): KeyEvent.NAVIGATE_DOWN,
}

# Escape chunk length -> event, when shorter than a full sequence
SHORT_ESCAPE_EVENTS: dict[int, KeyEvent] = {
    1: KeyEvent.CANCEL,
    # Neither a lone ESC nor a complete sequence
    2: KeyEvent.IGNORE,
}


def decode(chunk: bytes) -> KeyEvent:
    """Classify one raw input chunk.

    Total over all byte strings: every input maps to exactly one event.
    """
    if not chunk:
        return KeyEvent.END_OF_INPUT

    first = chunk[0]
    if first != ESC:
        return SINGLE_BYTE_EVENTS.get(first, KeyEvent.IGNORE)

    if len(chunk) < KEY_CHUNK_SIZE:
        return SHORT_ESCAPE_EVENTS[len(chunk)]
    return ESCAPE_SEQUENCE_EVENTS.get(chunk[2], KeyEvent.IGNORE)


class KeyReader:
    """Blocking reader that turns input chunks into key events.

    Reads straight from a file descriptor when one is available so a
    chunk is whatever one keypress delivered. Falls back to the binary
    ``stream`` otherwise.
    """

    def __init__(self, fd: Optional[int] = None, stream: Optional[BinaryIO] = None):
        if fd is None and stream is None:
            try:
                fd = sys.stdin.fileno()
            except (AttributeError, ValueError, io.UnsupportedOperation):
                stream = sys.stdin.buffer
        self.fd = fd
        self.stream = stream

    def read_chunk(self) -> bytes:
        """Read up to KEY_CHUNK_SIZE bytes; empty only at end of input."""
        if self.fd is not None:
            return os.read(self.fd, KEY_CHUNK_SIZE)
        return self.stream.read(KEY_CHUNK_SIZE)

    def read_event(self) -> KeyEvent:
        chunk = self.read_chunk()
        event = decode(chunk)
        debug_keys("Decoded key", chunk=chunk.hex() or "-", event=event.value)
        return event
