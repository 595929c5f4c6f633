"""Git queries and the checkout action."""

import subprocess
from pathlib import Path
from typing import Optional

from gitrecent.utils.debug import debug_git
from gitrecent.utils.exceptions import CommitActionError, RetrievalError


def parse_branch_lines(output: str, max_count: int) -> list[str]:
    """Parse ``git branch`` output into branch names.

    Lines look like ``* main`` or ``  feature``; the current-branch marker
    and surrounding whitespace are stripped and blank lines dropped.
    """
    branches = []
    for line in output.splitlines():
        name = line.strip().lstrip("*").strip()
        if not name:
            continue
        branches.append(name)
        if len(branches) >= max_count:
            break
    return branches


class GitBranchSource:
    """Branch candidates, the current branch and checkout, backed by git."""

    def __init__(self, cwd: Optional[Path] = None, git: str = "git"):
        self.cwd = cwd
        self.git = git

    def _query(self, *args: str) -> str:
        cmd = [self.git, *args]
        debug_git("Running query", cmd=" ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                cwd=self.cwd,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise RetrievalError(f"{self.git} not found") from e

        if result.returncode != 0:
            detail = result.stderr.strip() or f"exit status {result.returncode}"
            raise RetrievalError(f"git {args[0]} failed: {detail}")
        return result.stdout

    def list_recent(self, max_count: int) -> list[str]:
        """Return up to ``max_count`` branches, most recently committed first.

        Raises:
            RetrievalError: If git cannot list branches
        """
        output = self._query("branch", "--sort=-committerdate")
        branches = parse_branch_lines(output, max_count)
        debug_git("Loaded branches", count=len(branches))
        return branches

    def current_item(self) -> str:
        """Return the checked-out branch, or "" on a detached HEAD.

        Raises:
            RetrievalError: If git cannot be queried
        """
        return self._query("branch", "--show-current").strip()

    def apply(self, identifier: str) -> int:
        """Check out ``identifier``. Returns git's exit status, 0 on success.

        git's own output goes straight to the terminal.

        Raises:
            CommitActionError: If git could not be started
        """
        cmd = [self.git, "checkout", identifier]
        debug_git("Running checkout", cmd=" ".join(cmd))
        try:
            result = subprocess.run(cmd, cwd=self.cwd)
        except FileNotFoundError as e:
            raise CommitActionError(f"{self.git} not found") from e
        debug_git("Checkout finished", returncode=result.returncode)
        return result.returncode
