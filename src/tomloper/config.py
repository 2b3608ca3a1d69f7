"""Process-wide tomloper settings read from the environment."""

from __future__ import annotations

import logging
import os

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def _env_log_level(name: str, default: str) -> str:
    raw = os.environ.get(name, default).strip().upper()
    if raw not in logging.getLevelNamesMapping():
        raise ValueError(f"{name} must be a logging level name, got {raw!r}")
    return raw


class TomloperConfig:
    """Settings for logging around navigation and mutation.

    ``trace`` turns on DEBUG records for navigation misses and skipped
    mutations; those are ordinary outcomes so they are silent by default.
    """

    def __init__(self) -> None:
        self.log_level = "WARNING"
        self.trace = False
        self.rich_console = True
        self.reload()

    def reload(self) -> None:
        self.log_level = _env_log_level("TOMLOPER_LOG_LEVEL", "WARNING")
        self.trace = _env_bool("TOMLOPER_TRACE", False)
        self.rich_console = _env_bool("TOMLOPER_RICH_CONSOLE", True)


TOMLOPER_CONFIG = TomloperConfig()

__all__ = ["TOMLOPER_CONFIG", "TomloperConfig"]
