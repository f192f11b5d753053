"""Logging configuration for Budgetbook.

Sets up logging to both file (with date-based naming) and console. The CLI
reports everything through this logger, so console output is the user-facing
output and the dated file keeps a timestamped history of each session.
"""

import logging
from datetime import date
from config import Config

LOGGER_NAME = "budgetbook"


def setup_logging(config: Config) -> logging.Logger:
    """Set up application logging with file and console handlers.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    # Create log directory if it doesn't exist
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)

    # Clear any existing handlers (in case this is called multiple times)
    logger.handlers.clear()

    # File lines carry timestamps; console lines are what the user reads
    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_formatter = logging.Formatter("%(levelname)s - %(message)s")

    # One file per day: budgetbook-{date}.log
    log_file_path = config.log_dir / f"{LOGGER_NAME}-{date.today().isoformat()}.log"
    file_handler = logging.FileHandler(log_file_path)
    file_handler.setFormatter(detailed_formatter)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(console_formatter)

    for handler in (file_handler, console_handler):
        handler.setLevel(config.log_level)
        logger.addHandler(handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger.

    Modules call this at import time, before setup_logging has run; the
    handlers attach to the same named logger later.
    """
    return logging.getLogger(LOGGER_NAME)
