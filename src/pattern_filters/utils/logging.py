"""Logging setup for the filters.

Every module of the package logs through a child of the ``pattern_filters``
logger, so :func:`get_logger` with the default name configures all of them.
"""

import logging
from typing import Optional

PACKAGE_LOGGER = "pattern_filters"
LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s - %(message)s"


def get_logger(
    name: str = PACKAGE_LOGGER,
    log_to_console: bool = True,
    log_to_file: Optional[str] = None,
    level: int = logging.DEBUG
) -> logging.Logger:
    """
    Configure and return the logger the filters report to.

    Calling it again replaces the handlers installed by the previous call.

    :param str name: Logger name, ``"pattern_filters"`` for the whole package.
    :param bool log_to_console: If True, log to stderr.
    :param Optional[str] log_to_file: If set, also log to this file path.
    :param int level: Logging level, DEBUG shows sample sizes and draw counts.
    :return logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = []
    if log_to_console:
        handlers.append(logging.StreamHandler())
    if log_to_file:
        handlers.append(logging.FileHandler(log_to_file))
    if not handlers:
        handlers.append(logging.NullHandler())

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
