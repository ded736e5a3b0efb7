"""Logging configuration shared by the app and uvicorn."""

import logging.config
from typing import Any


def build_logging_config(level: str = "INFO") -> dict[str, Any]:
    """Build a dictConfig routing app and uvicorn logs through RichHandler.

    Args:
        level: Level for application loggers

    Returns:
        A dictionary accepted by logging.config.dictConfig
    """
    handler_names = ["default"]
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(name)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "default": {
                "class": "rich.logging.RichHandler",
                "formatter": "default",
                "level": "DEBUG",
                "rich_tracebacks": True,
                "show_time": True,
                "show_path": False,
                "log_time_format": "%Y-%m-%d %H:%M:%S",
            },
        },
        "loggers": {
            "uvicorn": {"handlers": handler_names, "level": "INFO", "propagate": False},
            "uvicorn.error": {"handlers": handler_names, "level": "INFO", "propagate": False},
            "uvicorn.access": {"handlers": handler_names, "level": "INFO", "propagate": False},
            "": {"handlers": handler_names, "level": level, "propagate": False},
        },
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the logging configuration."""
    logging.config.dictConfig(build_logging_config(level))
