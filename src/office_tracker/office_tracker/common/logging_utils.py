# Central logging setup: console always, rotating file when LOG_FILE is set.

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-12s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "office_tracker"


def setup_logger(name: str = ROOT_LOGGER_NAME, level=logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure a named logger with a console handler and, optionally, a
    rotating file handler.

    Args:
        name: logger name (module loggers under ``office_tracker.*`` inherit it)
        level: log level name or number
        log_file: path of the rotating log file, or None for console only

    Returns:
        logging.Logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Handlers already attached (create_app called twice, e.g. in tests)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        # max 5MB, 3 backups
        file_handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(module_name: str) -> logging.Logger:
    """Child logger for a module, e.g. ``office_tracker.attendance``."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{module_name}")
