"""
Logging configuration for the mock SInvoice server.

One dictConfig layout is shared by the application loggers and uvicorn.
Access-log lines for the configured health check path are dropped; every
other request, including authenticated ones, stays in the access log.
"""

import logging
import logging.config
from typing import Any, Dict

from sinvoice_mock.config import DEFAULT_API_ROOT

DEFAULT_HEALTH_PATH = f"{DEFAULT_API_ROOT}/health"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# uvicorn access records carry (client_addr, method, path_with_query, http_version, status_code)
ACCESS_METHOD_INDEX = 1
ACCESS_PATH_INDEX = 2


class HealthCheckFilter(logging.Filter):
    """Drop uvicorn access-log records for GET requests on the health path."""

    def __init__(self, health_path: str = DEFAULT_HEALTH_PATH):
        super().__init__()
        self.health_path = health_path

    def is_health_check(self, record: logging.LogRecord) -> bool:
        args = record.args
        if not isinstance(args, tuple) or len(args) <= ACCESS_PATH_INDEX:
            return False
        method = str(args[ACCESS_METHOD_INDEX]).upper()
        path = str(args[ACCESS_PATH_INDEX]).split("?", 1)[0]
        return method == "GET" and path == self.health_path

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name != "uvicorn.access":
            return True
        return not self.is_health_check(record)


def _logger(handler: str, level: str) -> Dict[str, Any]:
    return {"handlers": [handler], "level": level, "propagate": False}


def get_logging_config(level: str = "INFO", health_path: str = DEFAULT_HEALTH_PATH) -> Dict[str, Any]:
    """
    Build the dictConfig for the server.

    Args:
        level: Log level applied to the root, application and uvicorn loggers
        health_path: Request path whose GET access lines are suppressed

    Returns:
        Dictionary suitable for logging.config.dictConfig or uvicorn's log_config
    """
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "health_check_filter": {
                "()": HealthCheckFilter,
                "health_path": health_path,
            }
        },
        "formatters": {
            "default": {"format": LOG_FORMAT},
            "access": {"format": "%(message)s"},
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
            "access": {
                "class": "logging.StreamHandler",
                "formatter": "access",
                "stream": "ext://sys.stdout",
                "filters": ["health_check_filter"],
            },
        },
        "loggers": {
            "uvicorn": _logger("default", level),
            "uvicorn.error": _logger("default", level),
            "uvicorn.access": _logger("access", level),
            "sinvoice_mock": _logger("default", level),
        },
        "root": {"level": level, "handlers": ["default"]},
    }


def configure_logging(level: str = "INFO", health_path: str = DEFAULT_HEALTH_PATH) -> None:
    """Apply the logging configuration to the running process."""
    logging.config.dictConfig(get_logging_config(level, health_path))
