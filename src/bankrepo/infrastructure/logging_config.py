"""Logging setup for processes hosting the bank repository."""

import logging
import sys
from functools import lru_cache

from bankrepo_config.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Driver and SQL echo output stays at WARNING whatever LOG_LEVEL says
QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg")


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


@lru_cache(maxsize=1)
def configure_logging() -> None:
    """Send log records to stdout at the configured LOG_LEVEL.

    Runs once per process; later calls are no-ops. Unknown level names fall
    back to INFO.
    """
    level = _resolve_level(get_settings().log_level)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger("bankrepo").setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
