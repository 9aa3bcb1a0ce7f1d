"""
Structured logging configuration for the earnings dashboard.
Keyword extras are rendered as ``key=value`` pairs after the message.
"""

import logging
import sys
from typing import Optional

from painel.core.config import settings


class StructuredLogger:
    """Structured logger with consistent formatting and levels."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def debug(self, message: str, **kwargs):
        """Log debug message with structured data."""
        self.logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with structured data."""
        self.logger.info(message, extra=kwargs)

    def error(self, message: str, exc: Optional[Exception] = None, **kwargs):
        """Log error message with structured data."""
        if exc:
            self.logger.error(message, exc_info=exc, extra=kwargs)
        else:
            self.logger.error(message, extra=kwargs)


# Atributos padrão do LogRecord que não devem aparecer como campos extras
_RESERVED_ATTRS = frozenset({
    "name", "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno", "funcName",
    "created", "msecs", "relativeCreated", "thread", "threadName",
    "processName", "process", "taskName", "message", "timestamp",
})


class StructuredFormatter(logging.Formatter):
    """Formatter que anexa os campos extras ao final da linha."""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "timestamp"):
            record.timestamp = self.formatTime(record, self.default_time_format)

        base_format = f"[{record.timestamp}] {record.levelname} {record.name}: {record.getMessage()}"

        extra_fields = [
            f"{key}={value}"
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS
        ]
        if extra_fields:
            base_format = f"{base_format} | {' | '.join(extra_fields)}"

        if record.exc_info:
            base_format = f"{base_format}\n{self.formatException(record.exc_info)}"

        return base_format


def configure_logging(
    level: str = "INFO",
    enable_file: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure application-wide logging (stdout, plus a file when enabled).

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_file: Enable file logging
        log_file: Log file path (required if enable_file=True)
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root_logger.setLevel(numeric_level)

    formatter = StructuredFormatter()
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if enable_file and log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # Bibliotecas ruidosas
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance for the given name."""
    return StructuredLogger(name)


# Global logger instances for common use
app_logger = get_logger("painel")
api_logger = get_logger("painel.api")
engine_logger = get_logger("painel.engine")


def init_app_logging():
    """Initialize application logging based on settings."""
    log_config = {
        "level": settings.LOG_LEVEL,
        "enable_file": settings.LOG_TO_FILE,
        "log_file": settings.LOG_FILE_PATH,
    }

    configure_logging(**log_config)
    app_logger.info("Application logging initialized", **log_config)
