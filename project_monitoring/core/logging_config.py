import logging
import logging.config

from project_monitoring.core import config

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "level": config.LOG_LEVEL,
        },
    },
    "loggers": {
        "project_monitoring": {
            "handlers": ["console"],
            "level": config.LOG_LEVEL,
            "propagate": False,
        },
    },
}


def setup_logging() -> None:
    logging.config.dictConfig(LOGGING_CONFIG)
