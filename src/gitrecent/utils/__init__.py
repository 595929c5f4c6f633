"""Utilities for git-recent."""

from gitrecent.utils.exceptions import (
    CommitActionError,
    ConfigurationError,
    GitRecentError,
    RetrievalError,
)

__all__ = [
    "CommitActionError",
    "ConfigurationError",
    "GitRecentError",
    "RetrievalError",
]
