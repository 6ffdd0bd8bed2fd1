"""
Logging setup for ngxlex.

Log records go to stderr, so stdout only ever carries token output. An
optional rotating log file receives the same records without colors.
"""

import logging
import logging.handlers
import sys
from dataclasses import dataclass
from pathlib import Path


RESET = "\033[0m"

LEVEL_COLORS = {
    logging.DEBUG: "\033[2;36m",     # dim cyan
    logging.INFO: "\033[32m",        # green
    logging.WARNING: "\033[33m",     # yellow
    logging.ERROR: "\033[31m",       # red
    logging.CRITICAL: "\033[1;91m",  # bold bright red
}

LOGGER_NAME_COLOR = "\033[35m"


def _copy_record(record: logging.LogRecord) -> logging.LogRecord:
    """Copy a record so formatting never leaks into other handlers."""
    return logging.makeLogRecord(record.__dict__)


class PlainFormatter(logging.Formatter):
    """Formatter with a fixed-width level name."""

    def format(self, record: logging.LogRecord) -> str:
        record = _copy_record(record)
        record.levelname = f"{record.levelname:8}"
        return super().format(record)


class ColoredFormatter(PlainFormatter):
    """
    PlainFormatter that paints the level and logger name with ANSI codes.

    With use_colors=False it behaves exactly like PlainFormatter.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_colors: bool = True,
    ):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)

        record = _copy_record(record)
        color = LEVEL_COLORS.get(record.levelno, "")
        record.levelname = f"{color}{record.levelname:8}{RESET}"
        record.name = f"{LOGGER_NAME_COLOR}{record.name}{RESET}"
        return logging.Formatter.format(self, record)


@dataclass
class LogConfig:
    """Logging configuration, filled in from command-line flags."""

    console_level: str = "WARNING"
    console_colors: bool = True

    # Rotating log file, disabled when None
    log_file: str | None = None
    file_level: str = "DEBUG"
    file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    file_backup_count: int = 5

    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"


def get_log_level(level_str: str) -> int:
    """Convert string log level to logging constant."""
    levels = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "warn": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
    }
    return levels.get(level_str.lower(), logging.INFO)


def setup_logging(config: LogConfig | None = None) -> None:
    """
    Install stderr (and optional file) handlers on the ngxlex logger.

    Calling it again replaces the handlers from the previous call.
    """
    if config is None:
        config = LogConfig()

    package_logger = logging.getLogger("ngxlex")
    package_logger.setLevel(logging.DEBUG)
    package_logger.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(get_log_level(config.console_level))
    console.setFormatter(
        ColoredFormatter(
            fmt=config.format,
            datefmt=config.date_format,
            use_colors=config.console_colors and sys.stderr.isatty(),
        )
    )
    package_logger.addHandler(console)

    if config.log_file:
        Path(config.log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            config.log_file,
            maxBytes=config.file_max_bytes,
            backupCount=config.file_backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(get_log_level(config.file_level))
        file_handler.setFormatter(PlainFormatter(fmt=config.format, datefmt=config.date_format))
        package_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a component.

    Args:
        name: Component name (will be prefixed with ngxlex)

    Returns:
        Logger instance
    """
    if name.startswith("ngxlex"):
        return logging.getLogger(name)
    return logging.getLogger(f"ngxlex.{name}")
