"""git-recent - Check out a recently used git branch."""

from importlib.metadata import version

__version__ = version("git-recent")

from gitrecent.core import GitBranchSource, KeyEvent, ListModel

__all__ = [
    "GitBranchSource",
    "KeyEvent",
    "ListModel",
]
