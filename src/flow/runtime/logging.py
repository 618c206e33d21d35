from __future__ import annotations

import logging
import os
from pathlib import Path

from rich.console import Console
from rich.text import Text

LOG_LEVEL_ENV = "FLOW_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"

_LEVEL_STYLES = {
    "DEBUG": "dim",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold red",
}


class _FlowRichConsoleHandler(logging.Handler):
    """Renders ``LEVEL message [file.py:line]`` on stderr through rich."""

    def __init__(self, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._console = Console(stderr=True, soft_wrap=True)

    @staticmethod
    def _format_location(record: logging.LogRecord) -> str:
        return f"[{Path(record.pathname).name}:{record.lineno}]"

    @staticmethod
    def _format_message_text(record: logging.LogRecord) -> Text:
        text = Text()
        text.append(record.levelname, style=_LEVEL_STYLES.get(record.levelname, ""))
        text.append(" ")
        text.append(record.getMessage())
        return text

    def emit(self, record: logging.LogRecord) -> None:
        try:
            text = self._format_message_text(record)
            text.append(" ")
            text.append(self._format_location(record), style="dim")
            if record.exc_info:
                text.append("\n")
                text.append(logging.Formatter().formatException(record.exc_info))
            self._console.print(text, highlight=False)
        except Exception:
            self.handleError(record)


def get_logger() -> logging.Logger:
    return logging.getLogger("flow")


def _resolve_level(level: int | str | None) -> int | str:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LEVEL)
    if isinstance(level, str):
        return level.upper()
    return level


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach the console handler to the root logger and set the flow level.

    Safe to call repeatedly; the handler is only installed once.
    """

    root = logging.getLogger()
    if not any(isinstance(h, _FlowRichConsoleHandler) for h in root.handlers):
        root.addHandler(_FlowRichConsoleHandler())

    logger = get_logger()
    logger.setLevel(_resolve_level(level))
    return logger


__all__ = ["LOG_LEVEL_ENV", "configure_logging", "get_logger"]
