"""Constants used throughout git-recent."""

# Upper bound on branches fetched from git (bounds redraw cost)
MAX_BRANCHES = 200

# Number of branches shown at once
VISIBLE_WINDOW_SIZE = 5

# Bytes requested per read; enough for an arrow-key escape sequence
KEY_CHUNK_SIZE = 3

TITLE = "Select recent branch:"


class Ansi:
    """Terminal control sequences written by the selector."""

    CLEAR_SCREEN = "\x1b[H\x1b[J"
    COLUMN_START = "\x1b[G"
    HIDE_CURSOR = "\x1b[?25l"
    SHOW_CURSOR = "\x1b[?25h"
    # Blue background, black text
    HIGHLIGHT = "\x1b[44;30m"
    # White background, black text
    INDICATOR_ON = "\x1b[47;30m"
    INDICATOR_OFF = "\x1b[30m"
    RESET = "\x1b[0m"


class Indicator:
    """Scroll indicator labels."""

    ABOVE = "(less)"
    BELOW = "(more)"


ACTIVE_MARK = "*"
