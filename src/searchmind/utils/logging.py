"""Logging setup for searchmind.

Library modules log through children of the ``searchmind`` logger and never
configure handlers themselves; only ``setup_logging`` (called by the CLI)
does. Structured context is attached with ``log_with_context`` and rendered
by both formatters.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

PACKAGE_LOGGER = "searchmind"

# Chatty dependencies that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "openai")

logger = logging.getLogger(PACKAGE_LOGGER)


def _context(record: logging.LogRecord) -> dict[str, Any]:
    context = getattr(record, "context", None)
    return context if isinstance(context, dict) else {}


class JSONFormatter(logging.Formatter):
    """One JSON object per line, context fields merged at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class ConsoleFormatter(logging.Formatter):
    """Single-line human format: ``LEVEL logger: message [k=v ...]``."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        context = _context(record)
        if context:
            message += " [" + " ".join(f"{k}={v}" for k, v in context.items()) + "]"
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        level = f"{record.levelname:8}"
        if self.use_color:
            level = f"{self.COLORS.get(record.levelname, '')}{level}{self.RESET}"
        return f"{level} {record.name}: {message}"


def setup_logging(
    level: str = "WARNING",
    log_file: Path | None = None,
    json_format: bool = False,
    use_color: bool | None = None,
) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Log level name; unknown names fall back to WARNING.
        log_file: Optional file that receives JSON lines.
        json_format: Emit JSON on stderr as well.
        use_color: Colour console output; defaults to whether stderr is a TTY.

    Returns:
        The configured package logger.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    if use_color is None:
        use_color = sys.stderr.isatty()

    logger.setLevel(numeric_level)
    logger.handlers.clear()
    logger.propagate = False

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        JSONFormatter() if json_format else ConsoleFormatter(use_color=use_color)
    )
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get the logger for a module, e.g. ``get_logger(__name__)``."""
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """Log ``message`` with key-value context for the formatters.

    Args:
        logger: Logger instance.
        level: Log level (e.g., logging.DEBUG).
        message: Log message.
        **context: Fields rendered as ``k=v`` or merged into JSON.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra={"context": context}, stacklevel=2)
