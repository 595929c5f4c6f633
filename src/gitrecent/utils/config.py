"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Optional


def get_gitrecent_dir() -> Path:
    """Get the git-recent data directory (XDG-compliant)."""
    if env_dir := os.environ.get("GITRECENT_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "git-recent"


def _int_setting(data: dict, key: str, default: int) -> int:
    """Integer value of ``key``, or ``default`` when missing or not a number."""
    value = data.get(key, default)
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class Config:
    """Application configuration."""

    ENV_PREFIX = "GITRECENT_"

    def __init__(self, gitrecent_dir: Optional[Path] = None):
        """Load config from directory."""
        self.gitrecent_dir = gitrecent_dir or get_gitrecent_dir()
        self._config_file = self.gitrecent_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        from gitrecent.utils.constants import MAX_BRANCHES, VISIBLE_WINDOW_SIZE

        # Set defaults
        self.max_branches = MAX_BRANCHES
        self.visible_branches = VISIBLE_WINDOW_SIZE
        self.debug = False
        # Env var overrides persisted in config.json
        self.env: dict[str, str] = {}

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
            except (json.JSONDecodeError, IOError):
                data = {}
            # Wrong-shaped values fall back to defaults, key by key
            if not isinstance(data, dict):
                data = {}
            self.max_branches = _int_setting(data, "max_branches", MAX_BRANCHES)
            self.visible_branches = _int_setting(
                data, "visible_branches", VISIBLE_WINDOW_SIZE
            )
            self.debug = data.get("debug") is True
            env = data.get("env", {})
            if isinstance(env, dict):
                self.env = {str(k): str(v) for k, v in env.items()}

        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply env overrides: first from config.env, then from shell GITRECENT_* vars."""
        prefix = self.ENV_PREFIX

        def apply_env_dict(env_dict: dict[str, str]):
            for key, value in env_dict.items():
                # Support both GITRECENT_FOO and FOO formats in config.env
                if key.startswith(prefix):
                    attr_name = key[len(prefix) :].lower()
                else:
                    attr_name = key.lower()
                if attr_name in ("dir", "env") or not hasattr(self, attr_name):
                    continue
                current = getattr(self, attr_name)
                if isinstance(current, bool):
                    setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
                elif isinstance(current, int):
                    try:
                        setattr(self, attr_name, int(value))
                    except ValueError:
                        pass
                else:
                    setattr(self, attr_name, value)

        apply_env_dict(self.env)

        # Shell env vars win
        shell_env = {k: v for k, v in os.environ.items() if k.startswith(prefix)}
        apply_env_dict(shell_env)

    def save(self):
        """Save config to file."""
        self.gitrecent_dir.mkdir(parents=True, exist_ok=True)
        data = {
            "max_branches": self.max_branches,
            "visible_branches": self.visible_branches,
            "debug": self.debug,
            "env": self.env,
        }
        self._config_file.write_text(json.dumps(data, indent=2))

    def set_debug(self, enabled: bool):
        """Enable or disable debug mode."""
        self.debug = enabled
        self.save()

    def validate(self) -> None:
        """Check limits are usable.

        Raises:
            ConfigurationError: If a limit is not an integer or is below one
        """
        from gitrecent.utils.exceptions import ConfigurationError

        for name in ("max_branches", "visible_branches"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(
                    f"{name} must be an integer, got {value!r}"
                )
        if self.max_branches < 1:
            raise ConfigurationError(
                f"max_branches must be at least 1, got {self.max_branches}"
            )
        if self.visible_branches < 1:
            raise ConfigurationError(
                f"visible_branches must be at least 1, got {self.visible_branches}"
            )

    @property
    def log_path(self) -> Path:
        """Path to debug log."""
        return self.gitrecent_dir / "debug.log"
