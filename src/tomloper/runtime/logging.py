from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.text import Text

from ..config import TOMLOPER_CONFIG

LOGGER_NAME = "tomloper"

_ACTION_COLORS = {
    "navigate": "cyan",
    "replace": "green",
    "assign": "magenta",
    "append": "green",
    "extend": "green",
    "upsert": "green",
}
_LEVEL_STYLES = {
    "DEBUG": "dim",
    "INFO": "blue",
    "WARNING": "yellow",
    "ERROR": "bold red",
    "CRITICAL": "bold red",
}


class _TomloperRichConsoleHandler(logging.Handler):
    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self._console = console if console is not None else Console(stderr=True)

    @staticmethod
    def _format_location(record: logging.LogRecord) -> str:
        return f"[{Path(record.pathname).name}:{record.lineno}]"

    @staticmethod
    def _format_message_text(record: logging.LogRecord) -> Text:
        message = record.getMessage()
        text = Text(message)
        action, _, _ = message.partition(" ")
        color = _ACTION_COLORS.get(action)
        if color is not None:
            text.stylize(color, 0, len(action))
        return text

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = Text()
            line.append(f"{record.levelname:<8}", style=_LEVEL_STYLES.get(record.levelname, ""))
            line.append(" ")
            line.append_text(self._format_message_text(record))
            line.append(" ")
            line.append(self._format_location(record), style="dim")
            self._console.print(line, soft_wrap=True, highlight=False)
        except Exception:
            self.handleError(record)


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _has_tomloper_handler(logger: logging.Logger) -> bool:
    return any(getattr(h, "_tomloper_handler", False) for h in logger.handlers)


def configure_logging() -> logging.Logger:
    """Attach the tomloper console handler once and apply the configured level."""

    logger = get_logger()
    logger.setLevel(TOMLOPER_CONFIG.log_level)
    if _has_tomloper_handler(logger):
        return logger

    handler: logging.Handler
    if TOMLOPER_CONFIG.rich_console:
        handler = _TomloperRichConsoleHandler()
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(levelname)-8s %(message)s [%(filename)s:%(lineno)d]")
        )
    handler._tomloper_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger


def trace(message: str, *args: object) -> None:
    """Log a navigation or mutation outcome when tracing is switched on."""

    if TOMLOPER_CONFIG.trace:
        get_logger().debug(message, *args, stacklevel=2)
