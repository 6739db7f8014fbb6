"""Logging configuration for the localizer and its command line."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

# Log levels for different components
LOGGING_CONFIG = {
    "localized_string": logging.INFO,
    "localized_string.core": logging.INFO,
    # Resolution steps are chatty; only surface them in debug mode
    "localized_string.infra": logging.WARNING,
}


_LEVEL_COLORS = {
    logging.DEBUG: 36,
    logging.INFO: 32,
    logging.WARNING: 33,
    logging.ERROR: 31,
    logging.CRITICAL: 35,
}


class ColoredFormatter(logging.Formatter):
    """Console formatter that paints the level name; the record is left untouched."""

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None, use_color: bool = True) -> None:
        super().__init__(fmt, datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        code = _LEVEL_COLORS.get(record.levelno)
        if not self.use_color or code is None:
            return super().format(record)
        painted = logging.makeLogRecord(record.__dict__)
        painted.levelname = f"\033[{code}m{record.levelname}\033[0m"
        return super().format(painted)


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """Configure root logging: colored console output, optional rotating file."""

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Remove existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    console_formatter = ColoredFormatter(
        "%(asctime)s %(levelname)-8s %(name)s - %(message)s",
        datefmt="%H:%M:%S",
        use_color=console_handler.stream.isatty(),
    )
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d) - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    for logger_name, level in LOGGING_CONFIG.items():
        logging.getLogger(logger_name).setLevel(logging.DEBUG if debug else level)

    logging.getLogger(__name__).debug(
        "Logging configured (console=%s, file=%s)",
        'DEBUG' if debug else 'INFO',
        log_file or 'DISABLED',
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with proper configuration."""
    return logging.getLogger(name)
