"""Protocol for branch collaborators."""

from typing import Protocol


class BranchSource(Protocol):
    """Supplies candidates and performs the action on the chosen one.

    Allows swapping git for a fake in tests.
    """

    def list_recent(self, max_count: int) -> list[str]:
        """Return up to max_count identifiers, most recent first."""
        ...

    def current_item(self) -> str:
        """Return the active identifier, or "" if unknown."""
        ...

    def apply(self, identifier: str) -> int:
        """Act on the chosen identifier, return its exit status (0 is success)."""
        ...
