"""
Logging setup for the API process.
"""
import logging.config
import sys

from core.config_loader import settings


def setup_logging() -> None:
    formatter = "json" if settings.LOG_JSON else "standard"
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
                "stream": sys.stdout,
            },
        },
        "loggers": {
            "": {"level": settings.LOG_LEVEL, "handlers": ["console"]},
            # sqlalchemy echoes every statement at INFO
            "sqlalchemy.engine": {"level": "WARNING", "propagate": True},
        },
    })
