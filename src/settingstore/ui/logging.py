"""Logging configuration for the settingstore CLI.

Library code only emits records on the ``settingstore`` logger hierarchy; it
never installs handlers. The CLI calls ``setup_logging`` to route those
records to a log file and, when verbose, to the console.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from rich.logging import RichHandler

from settingstore.ui.console import console

LOGGER_NAME = "settingstore"


class JSONFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


def setup_logging(
    log_file: Path | None = None,
    verbose: bool = False,
    level: int = logging.INFO,
) -> logging.Logger:
    """Configure the ``settingstore`` logger and return it.

    Args:
        log_file: Optional file receiving every record. A ``.json`` suffix
            selects one JSON object per line.
        verbose: Also print records to the console.
        level: Minimum level for attached handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    close_logging()

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        if log_file.suffix == ".json":
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        logger.addHandler(file_handler)

    if verbose:
        console_handler = RichHandler(
            console=console,
            show_time=False,
            show_path=False,
        )
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

    return logger


def close_logging() -> None:
    """Detach and close every handler installed by ``setup_logging``."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)


__all__ = ["JSONFormatter", "LOGGER_NAME", "close_logging", "setup_logging"]
