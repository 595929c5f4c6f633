"""Core selector logic: key decoding, list state and git access."""

from gitrecent.core.git import GitBranchSource
from gitrecent.core.keys import KeyEvent, KeyReader, decode
from gitrecent.core.model import ListModel

__all__ = ["GitBranchSource", "KeyEvent", "KeyReader", "ListModel", "decode"]
