"""
Logging configuration for the result cleaner.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Any, Optional


class ColoredFormatter(logging.Formatter):
    """Console formatter that colours the level name when writing to a terminal."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
        'RESET': '\033[0m'      # Reset
    }

    def __init__(self, fmt=None, datefmt=None, use_color: bool = True):
        super().__init__(fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record):
        if not self.use_color:
            return super().format(record)

        log_color = self.COLORS.get(record.levelname, self.COLORS['RESET'])

        # Colour a copy so the file handler sees the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{log_color}{record.levelname}{self.COLORS['RESET']}"

        return super().format(record)


def setup_logger(
    name: str = "result_cleaner",
    level: str = "INFO",
    log_file: Optional[str] = None,
    stream=None
) -> logging.Logger:
    """
    Configure logger with console and optional file handlers.

    The logger passes everything down to DEBUG; `level` only filters
    the console, so the log file always gets the full detail.

    Args:
        name: Logger name
        level: Console logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path of a DEBUG-level log file (optional)
        stream: Console stream (default: stderr)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    # Console handler; stdout is left for CSV output
    console_stream = stream or sys.stderr
    console_handler = logging.StreamHandler(console_stream)
    console_handler.setLevel(getattr(logging, level.upper()))
    console_formatter = ColoredFormatter(
        '%(asctime)s [%(levelname)s]: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        use_color=hasattr(console_stream, 'isatty') and console_stream.isatty()
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def log_stats(logger: logging.Logger, stats_dict: Dict[str, Any], title: str = "Statistics"):
    """
    Log statistics dictionary.

    Args:
        logger: Logger instance
        stats_dict: Dictionary of statistics
        title: Section title
    """
    logger.info(f"=== {title} ===")
    for key, value in stats_dict.items():
        if isinstance(value, float):
            logger.info(f"  {key}: {value:.2f}")
        else:
            logger.info(f"  {key}: {value}")
    logger.info("=" * (len(title) + 8))
