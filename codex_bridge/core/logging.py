import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from codex_bridge.core.config.schema import VALID_LOG_LEVELS

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


class ConversationLogger:
    """Logger with correlation ID support"""

    @staticmethod
    def get_logger() -> logging.Logger:
        """Get logger with correlation ID support"""
        return logging.getLogger("conversation")

    @staticmethod
    @contextmanager
    def correlation_context(request_id: str) -> Generator[None, None, None]:
        """Context manager for correlation ID"""
        old_factory = logging.getLogRecordFactory()

        def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
            record = old_factory(*args, **kwargs)
            record.correlation_id = request_id
            return record

        logging.setLogRecordFactory(record_factory)
        try:
            yield
        finally:
            logging.setLogRecordFactory(old_factory)


class CorrelationFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        # Add correlation ID if available
        if hasattr(record, "correlation_id"):
            record.msg = f"[{record.correlation_id[:8]}] {record.msg}"
        return super().format(record)


def normalize_log_level(level: str) -> str:
    """Upper-case ``level`` and fall back to INFO when it is not a known level."""
    parts = level.split()
    name = parts[0].upper() if parts else ""
    return name if name in VALID_LOG_LEVELS else "INFO"


def configure_root_logging(log_level: str | None = None) -> logging.Handler:
    """Install the correlation-aware stream handler on the root logger.

    Args:
        log_level: Level name; defaults to the configured LOG_LEVEL.

    Returns:
        The handler that was installed.
    """
    if log_level is None:
        from codex_bridge.core.config.accessors import log_level as configured_level

        log_level = configured_level()
    level_name = normalize_log_level(log_level)

    handler = logging.StreamHandler()
    handler.setFormatter(CorrelationFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level_name))

    logging.getLogger(__name__).debug(f"Root logging configured at {level_name}")
    return handler
