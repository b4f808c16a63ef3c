"""
Logging configuration for the service.

One format for every logger, written to stdout. Request lines come
from the access log middleware (logger "userbase.access"), so the
server's own access lines and SQL echo are kept quiet.
Passwords, hashes and request bodies are never logged.
"""

import logging
import sys
from typing import Mapping

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "uvicorn.error": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
}


def configure_logging(
    level: str = "INFO", quiet_loggers: Mapping[str, int] = QUIET_LOGGERS
) -> None:
    """Configure the root logger and quiet the given third-party loggers.

    Args:
        level: Level name for the root logger. Unknown names mean INFO.
        quiet_loggers: Logger name to minimum level.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name, logger_level in quiet_loggers.items():
        logging.getLogger(name).setLevel(logger_level)
