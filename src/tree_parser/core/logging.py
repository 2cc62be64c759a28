"""
Logging setup for tree-parser.

Library modules only create ``logging.getLogger(__name__)`` loggers; the
CLI calls :func:`setup_logging` once to attach handlers to the
``tree_parser`` logger:
- Console output on stderr, human-readable, coloured unless NO_COLOR is
  set or stderr is not a TTY
- Optional JSONL file output, one JSON object per line
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

ROOT_LOGGER_NAME = "tree_parser"

# =============================================================================
# Terminal Colors (respects NO_COLOR)
# =============================================================================


def _no_color() -> bool:
    return bool(os.environ.get("NO_COLOR")) or not sys.stderr.isatty()


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    DIM = "\033[2m"

    DEBUG = "\033[36m"  # Cyan
    INFO = "\033[32m"  # Green
    WARNING = "\033[33m"  # Yellow
    ERROR = "\033[31m"  # Red
    CRITICAL = "\033[35m"  # Magenta


# =============================================================================
# Formatters
# =============================================================================


class JSONLFormatter(logging.Formatter):
    """
    Formats log records as JSON Lines.

    Example output:
    {"timestamp":"2025-01-15T10:30:45.123+00:00","level":"DEBUG","logger":"tree_parser.core.expression_lang.parser","message":"Tokenized 5 token(s) from '2 + 3'"}
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.levelno >= logging.WARNING:
            entry["source"] = {"file": record.pathname, "line": record.lineno}

        if record.exc_info and record.exc_info[0]:
            entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
            }

        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.DEBUG,
        logging.INFO: Colors.INFO,
        logging.WARNING: Colors.WARNING,
        logging.ERROR: Colors.ERROR,
        logging.CRITICAL: Colors.CRITICAL,
    }

    def __init__(self, use_color: bool | None = None) -> None:
        super().__init__()
        self.use_color = not _no_color() if use_color is None else use_color

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        name = record.name.removeprefix(f"{ROOT_LOGGER_NAME}.")
        level_name = record.levelname

        if self.use_color:
            level_color = self.LEVEL_COLORS.get(record.levelno, "")
            prefix = f"{Colors.DIM}{timestamp}{Colors.RESET} [{name}]"
            level_name = f"{level_color}{level_name}{Colors.RESET}"
        else:
            prefix = f"[{timestamp}] [{name}]"

        message = f"{prefix} {level_name}: {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


# =============================================================================
# Logger Setup
# =============================================================================


def setup_logging(
    level: str | int = logging.WARNING,
    log_file: Path | str | None = None,
    max_bytes: int = 1024 * 1024,  # 1MB
    backup_count: int = 3,
) -> logging.Logger:
    """
    Configure the ``tree_parser`` logger.

    Args:
        level: Minimum log level, as a name ("DEBUG") or a number
        log_file: Optional JSONL log file; parent directories are created
        max_bytes: Max size per log file before rotation
        backup_count: Number of backup files to keep

    Returns:
        The configured ``tree_parser`` logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ConsoleFormatter())
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(JSONLFormatter())
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    root_logger.propagate = False
    root_logger.debug("Logging initialized at %s", logging.getLevelName(level))
    return root_logger
