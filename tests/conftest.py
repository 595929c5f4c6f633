"""Shared pytest fixtures."""

import os
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture(autouse=True)
def mock_gitrecent_dir(temp_dir, monkeypatch):
    """Point git-recent at a throwaway config directory."""
    from gitrecent.utils.debug import mute_stderr, reload_config

    gitrecent_dir = temp_dir / ".git-recent"
    gitrecent_dir.mkdir()
    for key in list(os.environ):
        if key.startswith("GITRECENT_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("GITRECENT_DIR", str(gitrecent_dir))
    reload_config()
    yield gitrecent_dir
    reload_config()
    mute_stderr(False)
