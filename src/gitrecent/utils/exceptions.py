"""Custom exceptions for git-recent.

This module defines a hierarchy of exceptions for different error types:
- GitRecentError: Base exception for all git-recent errors
- RetrievalError: Querying git for branches failed
- CommitActionError: Checking out the chosen branch failed
- ConfigurationError: Configuration related errors
"""

from typing import Optional


class GitRecentError(Exception):
    """Base exception for all git-recent errors.

    All git-recent exceptions inherit from this class, allowing the CLI
    to report any of them with a single except clause.
    """

    pass


class RetrievalError(GitRecentError):
    """Branch retrieval errors.

    Raised when a git query cannot run, such as:
    - git binary not found
    - Not inside a repository
    - Non-zero exit status
    """

    pass


class CommitActionError(GitRecentError):
    """Commit action errors.

    Attributes:
        returncode: Exit status of the failed command, if it ran at all
    """

    def __init__(self, message: str, returncode: Optional[int] = None):
        super().__init__(message)
        self.returncode = returncode


class ConfigurationError(GitRecentError):
    """Configuration related errors.

    Raised when configuration values are unusable, such as a visible
    window smaller than one line.
    """

    pass
