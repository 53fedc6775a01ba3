"""
Logger configuration for the application
"""

import logging
import datetime

from career_fair.utils.config import Config
from career_fair.utils.path_helpers import ensure_dir

ROOT_LOGGER_NAME = "career_fair"


def setup_logger(name=ROOT_LOGGER_NAME, log_to_file=None, level=None):
    """
    Setup logger with appropriate handlers and formatters

    Args:
        name (str): Logger name
        log_to_file (bool): Whether to log to file, defaults to Config.Logging.TO_FILE
        level (str): Log level name, defaults to Config.Logging.LEVEL

    Returns:
        logging.Logger: Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level or Config.Logging.LEVEL, logging.INFO))

    # Calling setup twice must not duplicate output
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_to_file is None:
        log_to_file = Config.Logging.TO_FILE

    if log_to_file:
        today = datetime.datetime.now().strftime("%Y-%m-%d")
        logs_dir = ensure_dir(Config.Dirs.LOGS_DIR)
        log_file = logs_dir / f"{name}_{today}.log"

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(module_name):
    """
    Get logger for a module

    Args:
        module_name (str): Module name

    Returns:
        logging.Logger: Logger for the module
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{module_name}")
