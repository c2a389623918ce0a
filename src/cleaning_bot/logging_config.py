"""Structured JSON logging configuration.

The bot runs unattended next to the WhatsApp gateway, so its logs are the
only record of which chats sent which commands, why a message was ignored
and why a reply failed. Every record is one JSON object on stdout; fields
passed through `extra=` (origin, sender, command, event) become top-level
keys that can be filtered on.

Usage:
    from cleaning_bot.logging_config import configure_logging
    configure_logging("INFO")
"""

import copy
import logging
import logging.config

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "cleaning-bot",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    # One line per outbound HTTP call and per webhook would drown the command log
    "loggers": {
        "httpx": {"level": "WARNING"},
        "httpcore": {"level": "WARNING"},
        "uvicorn.access": {"level": "WARNING"},
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(level: str = "INFO") -> None:
    """Apply structured JSON logging configuration.

    Call once at application startup (in the FastAPI lifespan). All
    subsequent ``logging.getLogger()`` calls emit JSON to stdout.

    Args:
        level: Root log level name, e.g. "INFO" or "DEBUG".
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    config["root"]["level"] = level.upper()
    logging.config.dictConfig(config)
