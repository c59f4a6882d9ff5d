"""
Logging infrastructure for the candlestick pattern scanner.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .config import LoggingConfig


PACKAGE_LOGGER = "candlestick"


class StructuredFormatter(logging.Formatter):
    """Formatter prefixing records with their pattern context."""

    def format(self, record: logging.LogRecord) -> str:
        # Add pattern context from PatternLoggerAdapter
        if hasattr(record, 'pattern'):
            record = logging.makeLogRecord(record.__dict__)
            record.msg = f"[{record.pattern}] {record.msg}"
        return super().format(record)


class ColoredFormatter(StructuredFormatter):
    """Colored formatter for console output."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        # Restore levelname afterwards so other handlers stay uncolored
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logger(
    name: str,
    level: str = "INFO",
    log_file: Optional[str] = None,
    max_size: str = "10MB",
    backup_count: int = 5,
    console_output: bool = True
) -> logging.Logger:
    """
    Set up a logger with file rotation and optional console output.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (optional)
        max_size: Maximum log file size before rotation
        backup_count: Number of backup files to keep
        console_output: Whether to output to console

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Clear existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)

        console_format = ColoredFormatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        console_handler.setFormatter(console_format)
        logger.addHandler(console_handler)

    # File handler with rotation
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=_parse_size(max_size),
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(log_level)

        file_format = StructuredFormatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def configure_logging(config: "LoggingConfig") -> logging.Logger:
    """
    Configure the package logger from a LoggingConfig.

    Module loggers (`candlestick.patterns.scanner`, ...) propagate to it.
    """
    return setup_logger(
        name=PACKAGE_LOGGER,
        level=config.level,
        log_file=config.file_path,
        max_size=config.max_size,
        backup_count=config.backup_count,
        console_output=config.console_output
    )


# Longest suffix first so 'MB' is not read as 'B'
_SIZE_UNITS = (
    ('GB', 1024 * 1024 * 1024),
    ('MB', 1024 * 1024),
    ('KB', 1024),
    ('B', 1),
)
DEFAULT_MAX_BYTES = 10 * 1024 * 1024


def _parse_size(size_str: str) -> int:
    """Parse a size string such as '10MB' or '2.5 kb' to bytes, falling back to 10MB."""
    text = size_str.strip().upper()
    multiplier = 1
    for unit, factor in _SIZE_UNITS:
        if text.endswith(unit):
            text, multiplier = text[:-len(unit)].strip(), factor
            break

    try:
        return int(float(text) * multiplier)
    except ValueError:
        return DEFAULT_MAX_BYTES


class PatternLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter adding pattern context to every record."""

    def process(self, msg: str, kwargs: dict) -> tuple:
        extra = dict(self.extra)
        extra.update(kwargs.get('extra', {}))
        kwargs['extra'] = extra
        return msg, kwargs


def get_pattern_adapter(pattern: str, logger: Optional[logging.Logger] = None) -> PatternLoggerAdapter:
    """
    Get a logger adapter tagged with a pattern name.

    Args:
        pattern: Pattern name (e.g., 'hammer')
        logger: Underlying logger, defaults to the package logger

    Returns:
        Logger adapter with pattern context
    """
    return PatternLoggerAdapter(logger or logging.getLogger(PACKAGE_LOGGER), {'pattern': pattern})
