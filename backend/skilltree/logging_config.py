import logging
import os
from logging.config import dictConfig

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging() -> None:
    """Configure structured logging based on environment flags."""
    level = os.getenv("SKILLTREE_LOG_LEVEL", "INFO").upper()

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": DEFAULT_LOG_FORMAT,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "root": {
                "handlers": ["default"],
                "level": level,
            },
        }
    )

    # TELEMETRY lines fire once per layout computation; keep them out of busy logs.
    telemetry_logger = logging.getLogger("skilltree.telemetry")
    if os.getenv("SKILLTREE_TELEMETRY_LOG", "1") == "0":
        telemetry_logger.setLevel(logging.WARNING)
    else:
        telemetry_logger.setLevel(logging.NOTSET)
