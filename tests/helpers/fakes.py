"""In-memory stand-ins for git, stdin and the terminal guard.

Let the selector loop and the pick flow run end to end without a TTY
or a repository.
"""

from typing import Callable, Optional

from gitrecent.utils.exceptions import RetrievalError


class FakeBranchSource:
    """BranchSource backed by a list. Records every checkout."""

    def __init__(
        self,
        branches: list[str],
        current: str = "",
        apply_status: int = 0,
        list_error: Optional[Exception] = None,
        current_error: Optional[Exception] = None,
        on_apply: Optional[Callable[[str], None]] = None,
    ):
        self.branches = list(branches)
        self.current = current
        self.apply_status = apply_status
        self.list_error = list_error
        self.current_error = current_error
        self.on_apply = on_apply
        self.applied: list[str] = []
        self.requested_max: Optional[int] = None

    def list_recent(self, max_count: int) -> list[str]:
        self.requested_max = max_count
        if self.list_error:
            raise self.list_error
        return self.branches[:max_count]

    def current_item(self) -> str:
        if self.current_error:
            raise self.current_error
        return self.current

    def apply(self, identifier: str) -> int:
        if self.on_apply:
            self.on_apply(identifier)
        self.applied.append(identifier)
        return self.apply_status


def failing_source(message: str = "git branch failed: not a git repository"):
    return FakeBranchSource([], list_error=RetrievalError(message))


class ScriptedInput:
    """Binary stream handing out one pre-split chunk per read."""

    def __init__(self, *chunks: bytes):
        self.chunks = list(chunks)
        self.reads = 0

    def read(self, size: int = -1) -> bytes:
        self.reads += 1
        if not self.chunks:
            return b""
        chunk = self.chunks.pop(0)
        assert len(chunk) <= size
        return chunk


class FakeGuard:
    """RawModeGuard stand-in that records its lifecycle."""

    def __init__(self, log: Optional[list] = None):
        self.fd = None
        self.log = log if log is not None else []
        self.acquired = 0
        self.released = 0

    @property
    def active(self) -> bool:
        return self.acquired > self.released

    def acquire(self) -> bool:
        self.acquired += 1
        self.log.append("acquire")
        return True

    def release(self) -> None:
        if not self.active:
            return
        self.released += 1
        self.log.append("release")


class RecordingOutput:
    """Text stream that keeps writes, optionally logging them in order."""

    def __init__(self, log: Optional[list] = None):
        self.writes: list[str] = []
        self.log = log

    def write(self, text: str) -> int:
        self.writes.append(text)
        if self.log is not None:
            self.log.append(text)
        return len(text)

    def flush(self) -> None:
        pass

    def getvalue(self) -> str:
        return "".join(self.writes)
