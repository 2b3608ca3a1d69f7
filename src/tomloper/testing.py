from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from .config import TOMLOPER_CONFIG
from .document import parse
from .tree import TomlValue

SAMPLE_TOML = """\
ip = "127.0.0.1"
[host]
ip = "127.0.1.1"
port = 8080
protocol = ["tcp", "udp", "mmp"]
[[service]]
name = "serv_1"
desc = "first server"
[[service]]
name = "serv_2"
desc = "another server"
[misc]
int = 1234
float = 3.14
bool = true
"""


def sample_tree() -> dict[str, TomlValue]:
    """A fresh copy of the sample document used across tests and examples."""
    return parse(SAMPLE_TOML)


@dataclass(frozen=True)
class _TomloperConfigSnapshot:
    log_level: str
    trace: bool
    rich_console: bool

    @classmethod
    def capture(cls) -> "_TomloperConfigSnapshot":
        return cls(
            log_level=TOMLOPER_CONFIG.log_level,
            trace=TOMLOPER_CONFIG.trace,
            rich_console=TOMLOPER_CONFIG.rich_console,
        )

    def restore(self) -> None:
        TOMLOPER_CONFIG.log_level = self.log_level
        TOMLOPER_CONFIG.trace = self.trace
        TOMLOPER_CONFIG.rich_console = self.rich_console


@contextmanager
def override_config(**values: object) -> Generator[None, None, None]:
    snapshot = _TomloperConfigSnapshot.capture()
    for name, value in values.items():
        if not hasattr(snapshot, name):
            raise AttributeError(f"unknown tomloper setting {name!r}")
        setattr(TOMLOPER_CONFIG, name, value)
    try:
        yield
    finally:
        snapshot.restore()


@pytest.fixture
def tomloper_config() -> Generator[None, None, None]:
    """Restore the global config after the test, whatever it changed."""
    with override_config():
        yield


__all__ = ["SAMPLE_TOML", "override_config", "sample_tree", "tomloper_config"]
