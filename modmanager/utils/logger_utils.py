# modmanager/utils/logger_utils.py

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path

from modmanager.core.constants import LOG_DIR_NAME, LOG_FILE_PREFIX, LOGGER_NAME


# ANSI escape codes for colors
class LogColors:
    RESET = "\x1b[0m"
    GREY = "\x1b[38;21m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    RED = "\x1b[31m"
    BOLD_RED = "\x1b[31;1m"
    CYAN = "\x1b[36m"


class ColoredFormatter(logging.Formatter):
    """Console formatter: colored time, padded level, clickable location."""

    LOG_LEVEL_COLORS = {
        logging.DEBUG: LogColors.GREY,
        logging.INFO: LogColors.GREEN,
        logging.WARNING: LogColors.YELLOW,
        logging.ERROR: LogColors.RED,
        logging.CRITICAL: LogColors.BOLD_RED,
    }

    def __init__(self, datefmt="%B %d, %Y > %H:%M:%S"):
        super().__init__(fmt="%(message)s", datefmt=datefmt)

    def format(self, record):
        level_color = self.LOG_LEVEL_COLORS.get(record.levelno, LogColors.RESET)

        time_str = self.formatTime(record, self.datefmt)
        colored_time = f"{LogColors.GREEN}{time_str}{LogColors.RESET}"
        colored_level = f"{level_color}{record.levelname:<8}{LogColors.RESET}"

        location = f'File "{record.pathname}", line {record.lineno} |  {record.name}:{record.funcName}'
        colored_location = f"{LogColors.CYAN}{location}{LogColors.RESET}"

        colored_message = f"{level_color}{record.getMessage()}{LogColors.RESET}"

        log_entry = (
            f"{colored_time} | {colored_level} | {colored_location} - {colored_message}"
        )

        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
            log_entry += f"\n{LogColors.RED}{record.exc_text}{LogColors.RESET}"

        return log_entry


_logger_instance = None
_custom_log_dir = None


def set_log_directory(log_dir):
    """
    Set custom log directory. Must be called before first use of logger.
    """
    global _custom_log_dir
    _custom_log_dir = log_dir


def get_logger():
    """
    Get the shared logger instance, creating it on first access.
    """
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = setup_logger(_custom_log_dir)
    return _logger_instance


def setup_logger(log_dir=None):
    # === Setup log folder & file name ===
    if log_dir is None:
        log_dir = Path(__file__).resolve().parent.parent.parent / LOG_DIR_NAME
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H-%M-%S")
    log_file_path = log_dir / f"{LOG_FILE_PREFIX}_{timestamp}.log"

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Called again on reconfigure; drop the old handlers first
    if logger.hasHandlers():
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    # === Console handler (manual coloring) ===
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG)
    console_handler.setFormatter(ColoredFormatter())
    logger.addHandler(console_handler)

    # === File handler (no color, structured) ===
    # 5 MB per file, 10 backups
    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path, maxBytes=5 * 1024 * 1024, backupCount=10, encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        fmt="{asctime} | {levelname} | {name}:{funcName}:{lineno} - {message}",
        datefmt="%Y-%m-%d %H:%M:%S",
        style="{",
    )
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    return logger


def reconfigure_logger(log_dir):
    """
    Recreate the logger so it writes into log_dir.
    Called from main.py once the application folder is known.
    """
    global _logger_instance, _custom_log_dir
    _custom_log_dir = log_dir
    _logger_instance = setup_logger(log_dir)
    return _logger_instance


class LoggerProxy:
    """
    Forwards every attribute access to the lazily created logger, so modules
    can import `logger` at import time without creating log files.
    """

    def __getattr__(self, name):
        return getattr(get_logger(), name)


logger = LoggerProxy()
__all__ = ["logger", "reconfigure_logger", "set_log_directory"]
