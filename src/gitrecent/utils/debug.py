"""Debug logging utility."""

import sys
from datetime import datetime

from gitrecent.utils.config import Config, get_gitrecent_dir

_config = None

# Set while the terminal is in raw mode; stderr output would corrupt the menu
_stderr_muted = False


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config(get_gitrecent_dir())
    return _config


def reload_config():
    """Reload config (call after debug mode changes)."""
    global _config
    _config = None


def mute_stderr(muted: bool) -> None:
    """Route log lines to the log file only while ``muted`` is set."""
    global _stderr_muted
    _stderr_muted = muted


def _log_to_file(line: str):
    """Append line to debug log file."""
    try:
        log_dir = get_gitrecent_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        with open(log_dir / "debug.log", "a") as f:
            f.write(line + "\n")
    except OSError:
        pass


def _log_to_stderr(line: str):
    if _stderr_muted:
        return
    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'git', 'terminal', 'keys'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    config = _get_config()
    if not config.debug:
        return

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    extras = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[git-recent:{category}] {timestamp} {message}"
    if extras:
        line += f" | {extras}"

    _log_to_file(line)
    _log_to_stderr(line)


def debug_git(message: str, **kwargs):
    """Log git-related debug message."""
    debug("git", message, **kwargs)


def debug_terminal(message: str, **kwargs):
    """Log terminal-mode debug message."""
    debug("terminal", message, **kwargs)


def debug_keys(message: str, **kwargs):
    """Log key-decoding debug message."""
    debug("keys", message, **kwargs)


def log_error(category: str, message: str, exc: Exception = None):
    """Log error message ALWAYS to the log file (even if debug mode is off).

    Args:
        category: Category like 'git', 'cli'
        message: Error message
        exc: Optional exception to include traceback
    """
    import traceback

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    line = f"[git-recent:{category}] {timestamp} ERROR: {message}"

    if exc:
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        line += "\n" + "".join(tb)

    _log_to_file(line)

    # The CLI prints a friendly message itself; stderr copy only in debug mode
    if _get_config().debug:
        _log_to_stderr(line)
