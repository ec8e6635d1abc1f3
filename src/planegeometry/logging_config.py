"""
Logging Configuration
=====================
planegeometry is a library: importing it attaches only a `NullHandler` to the
'planegeometry' logger, so nothing is printed unless the embedding application
asks for it.

`setup_logging` is the opt-in path for applications and scripts that want the
package's cache fills and validation warnings on a stream or in a file. It only
ever replaces the handlers it installed itself; handlers added by the caller
stay attached.
"""
import logging
import sys
from typing import List, Optional, TextIO

PACKAGE_LOGGER_NAME = "planegeometry"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'

# Handlers installed by setup_logging, removed again on the next call
_installed_handlers: List[logging.Handler] = []


def get_package_logger() -> logging.Logger:
    return logging.getLogger(PACKAGE_LOGGER_NAME)


def install_null_handler() -> None:
    """Attach a NullHandler to the package logger, once."""
    logger = get_package_logger()
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())


def remove_installed_handlers() -> None:
    """Detach and close every handler previously added by `setup_logging`."""
    logger = get_package_logger()
    for handler in _installed_handlers:
        logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Route planegeometry log records to a stream and optionally a file.

    Calling it again replaces the handlers of the previous call, so records are
    never emitted twice.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        stream: Stream for console output, defaults to sys.stdout.

    Returns:
        The 'planegeometry' logger.
    """
    logger = get_package_logger()
    logger.setLevel(level)
    remove_installed_handlers()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        _installed_handlers.append(handler)

    logger.info("Logging initialized (level %s).", logging.getLevelName(level))
    return logger
