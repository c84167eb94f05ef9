"""Logging configuration module."""
import json
import logging
import logging.config
import os
import sys
import traceback
from typing import Any, Dict, Optional, Union

# Attributes every LogRecord carries; anything else arrived through ``extra``
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, **kwargs):
        """Initialize formatter with default fields added to every line."""
        self.default_fields = kwargs
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_data = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.filename}:{record.lineno}",
            "function": record.funcName
        }

        if record.exc_info:
            log_data["traceback"] = self.formatException(record.exc_info)

        # Fields passed via logger.info(..., extra={...})
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS and key not in log_data:
                log_data[key] = value

        log_data.update(self.default_fields)

        return json.dumps(log_data, default=str)


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    format: str = "json",
    env: str = "development"
) -> None:
    """Setup global logging configuration.

    Args:
        level: Logging level, as an int or a level name
        log_file: Path to log file
        format: Log format ('json' or 'text')
        env: Environment ('development' or 'production')
    """
    if format not in ("json", "text"):
        raise ValueError(f"Unknown log format: {format}")

    if isinstance(level, str):
        level = level.upper()

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": JsonFormatter,
                "environment": env
            },
            "text": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": format,
                "stream": sys.stdout
            }
        },
        "root": {
            "level": level,
            "handlers": ["console"]
        }
    }

    if log_file:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": format,
            "filename": log_file,
            "maxBytes": 10 * 1024 * 1024,  # 10MB
            "backupCount": 5,
            "encoding": "utf-8"
        }
        config["root"]["handlers"].append("file")

    logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        logging.Logger: Logger instance
    """
    return logging.getLogger(name)


def log_error(
    logger: logging.Logger,
    error: Exception,
    message: str,
    context: Optional[Dict[str, Any]] = None
) -> None:
    """Log an error with context.

    Args:
        logger: Logger instance
        error: Exception to log
        message: Error message
        context: Additional context
    """
    error_context = {
        "error_type": error.__class__.__name__,
        "error_message": str(error),
        "error_traceback": "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )
    }

    if context:
        error_context.update(context)

    logger.error(message, extra=error_context)
