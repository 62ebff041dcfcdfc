from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.text import Text

from ..config import NESTPATH_CONFIG

LOGGER_NAME = "nestpath"

_LEVEL_STYLES = {
    logging.DEBUG: "dim",
    logging.INFO: "cyan",
    logging.WARNING: "yellow",
    logging.ERROR: "red",
    logging.CRITICAL: "bold red",
}


class _NestpathRichConsoleHandler(logging.Handler):
    """Console handler that renders nestpath records with rich."""

    def __init__(self, level: int = logging.NOTSET, console: Console | None = None):
        super().__init__(level)
        self.console = console if console is not None else Console(stderr=True)

    @staticmethod
    def _format_location(record: logging.LogRecord) -> str:
        return f"[{Path(record.pathname).name}:{record.lineno}]"

    @staticmethod
    def _format_message_text(record: logging.LogRecord) -> Text:
        text = Text()
        style = _LEVEL_STYLES.get(record.levelno, "")
        text.append(f"{record.levelname:<8}", style=style)
        text.append(" ")
        text.append(record.getMessage())
        return text

    def emit(self, record: logging.LogRecord) -> None:
        try:
            text = self._format_message_text(record)
            text.append(" ")
            text.append(self._format_location(record), style="dim")
            self.console.print(text, highlight=False, soft_wrap=True)
        except Exception:
            self.handleError(record)


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach the rich console handler to the nestpath logger.

    Calling this more than once updates the level but never adds a second
    handler. ``level`` defaults to ``NESTPATH_CONFIG.log_level``.
    """

    if level is not None:
        NESTPATH_CONFIG.log_level = level
    logger = get_logger()
    logger.setLevel(NESTPATH_CONFIG.log_level)
    if not any(isinstance(h, _NestpathRichConsoleHandler) for h in logger.handlers):
        logger.addHandler(_NestpathRichConsoleHandler())
    return logger
