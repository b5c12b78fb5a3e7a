"""
Centralized logging configuration for the Escalas application.
All modules should import get_logger from here so output stays consistent.
The entry point calls setup_logging once; importing this module has no side effects.
"""
import logging
import logging.handlers
import os
from datetime import datetime
from pathlib import Path


def setup_logging(
    log_level: str = "INFO",
    log_dir: str = "logs",
    app_name: str = "escalas",
    max_file_size: int = 5 * 1024 * 1024,  # 5MB
    backup_count: int = 3
) -> str:
    """
    Set up application logging with a rotating file handler and a console handler.

    Args:
        log_level: Logging level for the console (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files
        app_name: Application name used as the log file prefix
        max_file_size: Maximum size of each log file in bytes
        backup_count: Number of rotated files to keep

    Returns:
        Path of the log file in use
    """
    Path(log_dir).mkdir(parents=True, exist_ok=True)

    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    simple_formatter = logging.Formatter('%(levelname)s - %(message)s')

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = os.path.join(log_dir, f"{app_name}_{timestamp}.log")

    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=max_file_size,
        backupCount=backup_count,
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(detailed_formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(simple_formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    root_logger.info(f"Logging configured - Level: {log_level}, File: {log_file}")
    return log_file


def set_log_level(level: str) -> None:
    """
    Change the console log level at runtime.

    Args:
        level: New logging level name
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        return
    for handler in logging.getLogger().handlers:
        # RotatingFileHandler is a StreamHandler subclass; the file keeps DEBUG
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(numeric_level)


def get_logger(name):
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
