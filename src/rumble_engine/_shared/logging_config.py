# Area: Shared
"""
rumble_engine._shared.logging_config — Structured logging setup
===============================================================

Configures dual logging: terminal (colored) + file (JSON lines).
Provides structured error logging for rejected commands.
Ticker mode suppresses standard logs on the terminal while the event
ticker prints the live match feed.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from ..errors import RumbleEngineError

# Package logger
logger = logging.getLogger("rumble_engine")

# Flag to control ticker-only terminal output
_ticker_mode_enabled = False


class TickerFilter(logging.Filter):
    """Filter that suppresses terminal logs while ticker mode is enabled."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not _ticker_mode_enabled


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        error_type = getattr(record, "error_type", None)
        if error_type:
            log_data["error_type"] = error_type
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    log_file_path: str = "rumble_engine.log",
    level: Union[int, str] = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str
        Path to the log file. Defaults to 'rumble_engine.log' in current dir.
    level : int or str
        Logging level. Defaults to INFO.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    pkg_logger = logging.getLogger("rumble_engine")
    pkg_logger.setLevel(level)
    pkg_logger.handlers.clear()

    # Log lines go to stderr so stdout stays clean JSON for the CLI
    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(TickerFilter())
    pkg_logger.addHandler(terminal_handler)

    try:
        log_path = Path(log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(JSONFormatter())
        pkg_logger.addHandler(file_handler)
    except OSError as e:
        pkg_logger.warning(f"Could not create log file: {e}")

    pkg_logger.propagate = False


def log_engine_error(error: "RumbleEngineError") -> None:
    """
    Log a rejected or failed command in the structured format.

    Parameters
    ----------
    error : RumbleEngineError
        The error raised by the controller.
    """
    print(error.format_error_log(), file=sys.stderr)

    log = logger.warning if error.retryable else logger.error
    log(
        f"Command error: {error.__class__.__name__}: {error.message}",
        extra={"error_type": error.error_type},
    )


def enable_ticker_mode() -> None:
    """Suppress standard terminal logs; file logging is unchanged."""
    global _ticker_mode_enabled
    _ticker_mode_enabled = True


def disable_ticker_mode() -> None:
    """Restore standard terminal logging."""
    global _ticker_mode_enabled
    _ticker_mode_enabled = False


def is_ticker_mode_enabled() -> bool:
    return _ticker_mode_enabled
