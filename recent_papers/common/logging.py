import logging
import sys
from typing import Literal

from recent_papers.common.settings import get_settings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_FORMAT = "%(asctime)s | [%(levelname)s] | %(name)s | %(message)s"
JSON_FORMAT = (
    '{"time": "%(asctime)s","level": "%(levelname)s","logger": "%(name)s","message": "%(message)s"}'
)

# Noisy transport loggers; the arXiv client logs its own request/response lines
QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging(
    level: LogLevel | None = None,
    json_output: bool | None = None,
) -> None:
    """
    Configure root logging for an application embedding recent_papers.

    The library never calls this itself. Level and format default to the
    LOG_LEVEL / LOG_JSON application settings, so a digest job or scheduler
    only needs ``setup_logging()`` before awaiting ``get_recent_papers``.
    """
    settings = get_settings()
    level = level or settings.log_level
    json_output = settings.log_json if json_output is None else json_output

    logging.basicConfig(
        level=level,
        format=JSON_FORMAT if json_output else DEFAULT_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
