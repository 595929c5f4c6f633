"""Menu rendering.

``render`` is a pure function of the list state: it returns the exact
strings to write, in order, and touches nothing else. Raw mode turns off
the implicit carriage return, so every line after the title starts by
moving to column one.
"""

from gitrecent.core.model import ListModel
from gitrecent.utils.constants import ACTIVE_MARK, TITLE, Ansi, Indicator


def format_indicator(label: str, active: bool) -> str:
    """Scroll indicator line, inverted when more items exist that way."""
    style = Ansi.INDICATOR_ON if active else Ansi.INDICATOR_OFF
    return f"{Ansi.COLUMN_START}  {style}{label}{Ansi.RESET}\n"


def format_item(name: str, is_active: bool, is_selected: bool) -> str:
    mark = ACTIVE_MARK if is_active else " "
    if is_selected:
        return f"{Ansi.COLUMN_START} {Ansi.HIGHLIGHT}{mark} {name}{Ansi.RESET}\n"
    return f"{Ansi.COLUMN_START} {mark} {name}\n"


def render(model: ListModel, title: str = TITLE) -> list[str]:
    """Build the full frame for ``model``."""
    lines = [Ansi.CLEAR_SCREEN, f"{title}\n"]
    lines.append(format_indicator(Indicator.ABOVE, model.has_more_above()))

    for i, name in enumerate(model.visible_slice(), start=model.offset):
        lines.append(
            format_item(
                name,
                is_active=bool(model.active) and name == model.active,
                is_selected=i == model.selected,
            )
        )

    lines.append(format_indicator(Indicator.BELOW, model.has_more_below()))
    return lines
