"""
Logging utilities for the Data Import Orchestrator

Provides structured logging configuration and import context helpers. Log
output goes to stderr, stdout is reserved for import summaries.
"""

import logging
import sys
import json
from datetime import datetime, timezone
from typing import Optional, TextIO
from pathlib import Path


_RESERVED_RECORD_FIELDS = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
    'filename', 'module', 'lineno', 'funcName', 'created',
    'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'message', 'exc_info', 'exc_text',
    'stack_info', 'taskName'
}


class StructuredFormatter(logging.Formatter):
    """
    Custom formatter for structured JSON logging.

    Formats log records as JSON with additional context fields for better
    observability and log aggregation.
    """

    def __init__(self, include_extra: bool = True):
        super().__init__()
        self.include_extra = include_extra

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info)
            }

        if self.include_extra:
            extra_fields = {
                key: value for key, value in record.__dict__.items()
                if key not in _RESERVED_RECORD_FIELDS
            }
            if extra_fields:
                log_entry["extra"] = extra_fields

        return json.dumps(log_entry, default=str, ensure_ascii=False)


class ImportContextFilter(logging.Filter):
    """
    Filter to add import context to log records.

    Attached to handlers so that records propagated from module loggers
    (``data_import_orchestrator.services.dispatcher`` and friends) pick up
    the import_type and other context of the running job.
    """

    def __init__(self):
        super().__init__()
        self.context = {}

    def set_context(self, **kwargs):
        """Set context variables for logging."""
        self.context.update(kwargs)

    def clear_context(self):
        """Clear all context variables."""
        self.context.clear()

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context to log record."""
        for key, value in self.context.items():
            setattr(record, key, value)
        return True


def _build_formatter(structured: bool) -> logging.Formatter:
    if structured:
        return StructuredFormatter()
    return logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')


def setup_logger(
    name: str,
    level: str = "INFO",
    structured: bool = True,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Set up a logger with appropriate configuration.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        structured: Whether to use structured JSON logging
        log_file: Optional log file path
        stream: Console stream, stderr when omitted

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Replace handlers of an earlier call instead of stacking them
    if getattr(logger, "context_filter", None) is not None:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    log_level = getattr(logging, level.upper())
    logger.setLevel(log_level)

    context_filter = ImportContextFilter()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(_build_formatter(structured))
    console_handler.addFilter(context_filter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(_build_formatter(structured))
        file_handler.addFilter(context_filter)
        logger.addHandler(file_handler)

    # Store filter reference for context management
    logger.context_filter = context_filter

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def _find_context_filter(logger: logging.Logger) -> Optional[ImportContextFilter]:
    current = logger
    while current is not None:
        context_filter = getattr(current, "context_filter", None)
        if context_filter is not None:
            return context_filter
        current = current.parent
    return None


def set_log_context(logger: logging.Logger, **kwargs):
    """
    Set context variables for a logger or its nearest configured ancestor.

    Args:
        logger: Logger instance
        **kwargs: Context variables to set
    """
    context_filter = _find_context_filter(logger)
    if context_filter is not None:
        context_filter.set_context(**kwargs)


def clear_log_context(logger: logging.Logger):
    """
    Clear context variables for a logger or its nearest configured ancestor.

    Args:
        logger: Logger instance
    """
    context_filter = _find_context_filter(logger)
    if context_filter is not None:
        context_filter.clear_context()


class LoggerContext:
    """
    Context manager for temporary log context.

    Automatically sets and restores log context variables.
    """

    def __init__(self, logger: logging.Logger, **kwargs):
        self.logger = logger
        self.context = kwargs
        self.old_context = {}
        self._context_filter = _find_context_filter(logger)

    def __enter__(self):
        """Set temporary context."""
        if self._context_filter is not None:
            self.old_context = self._context_filter.context.copy()
            self._context_filter.set_context(**self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Restore old context."""
        if self._context_filter is not None:
            self._context_filter.context = self.old_context
