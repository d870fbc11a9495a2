"""Logging configuration for the scm_client package.

Only the ``scm_client`` logger is touched; handlers and levels of the root
logger belong to the application or test runner.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from .config import MockClientConfig

PACKAGE_LOGGER = "scm_client"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(config: MockClientConfig) -> logging.Logger:
    """Apply the logging settings of config to the scm_client logger.

    Args:
        config: Client config; log_level and log_file are applied only when set

    Returns:
        The scm_client logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    if config.log_level:
        package_logger.setLevel(config.log_level.upper())

    if config.log_file:
        log_file = Path(config.log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        package_logger.addHandler(file_handler)

    return package_logger


@contextmanager
def scoped_logging(config: MockClientConfig) -> Iterator[logging.Logger]:
    """Apply config with setup_logging and undo it on exit."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    level, handlers = package_logger.level, package_logger.handlers[:]
    try:
        yield setup_logging(config)
    finally:
        for handler in package_logger.handlers:
            if handler not in handlers:
                handler.close()
        package_logger.handlers[:] = handlers
        package_logger.setLevel(level)
