"""Scrollable list state for the branch selector."""

from dataclasses import dataclass, field

from gitrecent.utils.constants import VISIBLE_WINDOW_SIZE


@dataclass
class ListModel:
    """Candidate branches, the selection and the visible window.

    After every mutation:
        0 <= offset <= selected < offset + window_size
        offset + window_size <= len(items) when the list fills a window,
        otherwise offset == 0

    ``active`` only affects display, never navigation.
    Selection and window always start at the top; only the navigate
    methods and promote move them.
    """

    items: list[str]
    active: str = ""
    window_size: int = VISIBLE_WINDOW_SIZE
    selected: int = field(default=0, init=False)
    offset: int = field(default=0, init=False)

    def __post_init__(self):
        if not self.items:
            raise ValueError("ListModel needs at least one item")
        if self.window_size < 1:
            raise ValueError(f"window_size must be >= 1, got {self.window_size}")
        self.items = list(self.items)

    @property
    def selected_item(self) -> str:
        return self.items[self.selected]

    def navigate_up(self) -> None:
        """Move selection up one, scrolling when it leaves the window."""
        if self.selected > 0:
            self.selected -= 1
        if self.offset > self.selected:
            self.offset -= 1

    def navigate_down(self) -> None:
        """Move selection down one, scrolling when it leaves the window."""
        if self.selected + 1 < len(self.items):
            self.selected += 1
        if self.selected >= self.offset + self.window_size:
            self.offset += 1

    def visible_slice(self) -> list[str]:
        return self.items[self.offset : self.offset + self.window_size]

    def has_more_above(self) -> bool:
        return self.offset > 0

    def has_more_below(self) -> bool:
        return self.offset + self.window_size < len(self.items)

    def promote(self, identifier: str) -> None:
        """Move ``identifier`` to the front (most recently used first).

        Selection and window reset to the top, where the item now sits.
        """
        self.items.remove(identifier)
        self.items.insert(0, identifier)
        self.selected = 0
        self.offset = 0
