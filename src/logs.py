"""Logging helpers."""

import logging

from config import Config

LOG_FORMAT = "[{%(asctime)s} %(levelname)-7s %(filename)10s : %(lineno)-4s] %(funcName)30s %(message)s %(threadName)s"

# Log timestamp format (ISO 8601)
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def create_formatter() -> logging.Formatter:
    """Create the formatter shared by every handler."""
    return logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)


def create_file_log_handler(log_file: str) -> logging.FileHandler:
    """Create a file-based logging handler."""
    log_handler = logging.FileHandler(log_file)
    log_handler.setFormatter(create_formatter())

    return log_handler


def create_stream_log_handler() -> logging.StreamHandler:
    """Create a logging handler that writes to stderr."""
    log_handler = logging.StreamHandler()
    log_handler.setFormatter(create_formatter())

    return log_handler


def setup_logger(config: Config) -> logging.Logger:
    """Set up the pages logger.

    Any handlers left over from a previous setup are removed first, so
    calling this more than once does not duplicate output.

    Args:
        config (Config): supplies the level and optional log file

    Returns:
        logging.Logger: the configured logger
    """
    logger = logging.getLogger("pages")

    # remove any existing handlers
    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()

    logger.setLevel(config.log_level)
    logger.addHandler(create_stream_log_handler())

    if config.log_file is not None:
        logger.addHandler(create_file_log_handler(config.log_file))

    return logger
