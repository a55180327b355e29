"""
Logging Configuration

Logging setup for the calculator. Every evaluation gets a short
correlation ID so its log lines can be grouped, and records can be
written as JSON lines carrying the expression and error kind.
"""

import logging
import sys
import json
from typing import Optional, Dict, Any, List
from contextvars import ContextVar

LOGGER_NAMESPACE = "exprcalc"

# Fields the service attaches with `extra=`
EVALUATION_FIELDS = ("expression", "error_kind")

# Correlation ID of the evaluation currently running
_correlation_id_ctx: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)

_logging_configured = False


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID."""
    return _correlation_id_ctx.get()


def set_correlation_id(correlation_id: Optional[str]) -> None:
    """Set the current correlation ID."""
    _correlation_id_ctx.set(correlation_id)


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Only the evaluation fields are copied from `extra=`; other
    record attributes are left out.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        correlation_id = get_correlation_id()
        if correlation_id:
            log_data["correlation_id"] = correlation_id

        for key in EVALUATION_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    # stderr keeps log lines out of the shell's own output on stdout
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    return handlers


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> None:
    """
    Configure the package logger. Later calls are ignored.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file to also write logs to
        json_format: Write JSON lines instead of plain text
    """
    global _logging_configured

    if _logging_configured:
        return

    if json_format:
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    package_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    package_logger.handlers = []

    for handler in _build_handlers(log_file):
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    _logging_configured = True


def setup_logging_from_config(config) -> None:
    """Configure logging from a CalculatorConfig."""
    setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Module name (will be prefixed with 'exprcalc.')
    """
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
