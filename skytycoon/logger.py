"""Logging setup for the API process."""

import logging
import logging.handlers
from typing import List

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5

# Handlers installed by configure_logging, replaced on reconfiguration
_installed_handlers: List[logging.Handler] = []


def configure_logging(level: str = "INFO", log_file: str = "skytycoon.log") -> None:
    """
    Send application logs to the console and, optionally, a rotating file.

    Calling it again replaces the handlers it installed before.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR); unknown names mean INFO
        log_file: Rotating log file path, empty to log to the console only
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
            )
        )

    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        _installed_handlers.append(handler)

    root_logger.setLevel(log_level)
