"""
Logging configuration for the ManningMC application.
"""

import logging
import sys
from typing import Optional

LOGGER_NAMESPACES = ("modules", "app")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configure console (and optionally file) logging for the application loggers.

    Parameters
    ----------
    level : int
        Logging level, e.g. ``logging.DEBUG``.
    log_file : str, optional
        Path of a log file to write alongside the console output.
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    for name in LOGGER_NAMESPACES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Streamlit re-executes the script on every interaction
        if logger.hasHandlers():
            logger.handlers.clear()
        for handler in handlers:
            logger.addHandler(handler)
        logger.propagate = False

    logging.getLogger("app").info("Logging initialized.")
