"""Allow running as python -m gitrecent.cli."""

from gitrecent.cli import app

app()
