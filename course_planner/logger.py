"""
Logging setup for the course planner.

Configures the ``course_planner`` logger with a rotating log file and a
console handler, and installs a global hook that logs unhandled exceptions.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

LOGGER_NAME = 'course_planner'


def setup_logging(log_level=logging.INFO, log_file='course_planner.log', console=True):
    """
    Set up application logging.

    Args:
        log_level: The logging level (default: INFO)
        log_file: Path of the rotating log file, or None/'' to skip it
        console: Also log to stderr (always on when there is no log file)

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    # Prevent adding handlers multiple times
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(log_level)
        return logger

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_file:
        # 10MB max, 5 backup files
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10*1024*1024,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console or not log_file:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def handle_exception(exc_type, exc_value, exc_traceback):
    """Log an unhandled exception; keyboard interrupts go to the default hook."""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    logging.getLogger(LOGGER_NAME).error(
        "Unhandled exception",
        exc_info=(exc_type, exc_value, exc_traceback)
    )


def setup_global_exception_handler():
    sys.excepthook = handle_exception
    logging.getLogger(LOGGER_NAME).debug("Global exception handler installed")
