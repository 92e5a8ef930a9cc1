"""Logging setup for the application and uvicorn."""

import json
import logging
from logging.config import dictConfig
from traceback import format_exception


class JsonFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            payload["error"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None,
                "stack": "".join(format_exception(*record.exc_info)),
            }

        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "plain") -> None:
    """
    Configure the root logger.

    Args:
        level: Root log level name
        fmt: "plain" for human readable lines, "json" for structured output
    """
    formatter_name = "json" if fmt == "json" else "plain"

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,  # keep uvicorn loggers
            "formatters": {
                "plain": {
                    "format": "%(asctime)s %(levelname)-5s %(name)s: %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                },
                "json": {
                    "()": JsonFormatter,
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                },
            },
            "handlers": {
                "stream": {
                    "class": "logging.StreamHandler",
                    "level": level.upper(),
                    "formatter": formatter_name,
                }
            },
            "root": {
                "level": level.upper(),
                "handlers": ["stream"],
            },
        }
    )
