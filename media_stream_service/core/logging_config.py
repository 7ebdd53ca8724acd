"""
Logging configuration for the Media Stream Service.

Console and rotating file logging for the root logger, quieter levels for
the web server libraries, and per-component error tracking.
"""

import copy
import logging
import logging.handlers
import os
import sys
from datetime import datetime
from typing import Dict, Optional, Tuple

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

# logger name -> (level when debugging, level otherwise)
COMPONENT_LEVELS: Dict[str, Tuple[int, int]] = {
    'media_stream_service.streaming': (logging.DEBUG, logging.INFO),
    'uvicorn': (logging.INFO, logging.WARNING),
    'fastapi': (logging.WARNING, logging.WARNING),
}


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output"""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.COLORS.get(record.levelname)
        if color:
            # The file handler formats the same record
            record = copy.copy(record)
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def _file_handler(log_file: str) -> Optional[logging.Handler]:
    try:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(log_file, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS)
    except OSError as e:
        print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)
        return None

    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def _log_uncaught_exception(exc_type, exc_value, exc_traceback):
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logging.getLogger("uncaught_exception").critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Replace the root logger's handlers and install the uncaught-exception hook"""
    level_name = log_level.upper()
    level = getattr(logging, level_name)
    debugging = level_name == "DEBUG"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file:
        handler = _file_handler(log_file)
        if handler:
            root_logger.addHandler(handler)

    for name, (debug_level, normal_level) in COMPONENT_LEVELS.items():
        logging.getLogger(name).setLevel(debug_level if debugging else normal_level)

    sys.excepthook = _log_uncaught_exception

    logging.getLogger(__name__).info(f"Logging initialized - Level: {level_name}, File: {log_file}")


class ErrorTracker:
    """Count and log a component's errors with request context"""

    def __init__(self, component_name: str):
        self.component_name = component_name
        self.logger = logging.getLogger(f"errors.{component_name}")
        self.error_count = 0
        self.last_error_time: Optional[datetime] = None

    def log_error(self, error: Exception, context: str = "",
                  additional_data: Optional[dict] = None) -> None:
        self.error_count += 1
        self.last_error_time = datetime.now()

        error_msg = f"Error in {self.component_name}"
        if context:
            error_msg += f" ({context})"
        error_msg += f": {error}"
        if additional_data:
            error_msg += f" | Data: {additional_data}"

        self.logger.error(error_msg, exc_info=error)

    def get_error_stats(self) -> dict:
        return {
            "component": self.component_name,
            "error_count": self.error_count,
            "last_error_time": self.last_error_time.isoformat() if self.last_error_time else None
        }


def get_error_tracker(component_name: str) -> ErrorTracker:
    """Get an error tracker for a component"""
    return ErrorTracker(component_name)
