"""Logging configuration module."""

import logging
from dataclasses import dataclass

from codex_bridge.core.config.schema import ConfigSchema
from codex_bridge.core.config.validation import ConfigError, load_env_var

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoggingConfig:
    """Logging settings.

    Attributes:
        log_level: Root log level name, upper-cased, trailing comments dropped
        log_request_metrics: Whether per-conversion metrics are logged
    """

    log_level: str
    log_request_metrics: bool


class LoggingSettings:
    @staticmethod
    def load() -> LoggingConfig:
        """Load logging configuration.

        An invalid LOG_LEVEL falls back to the schema default with a warning;
        ``config validate`` still reports it.
        """
        try:
            # Extract just the first word to tolerate inline comments in .env files
            log_level = load_env_var(ConfigSchema.LOG_LEVEL).split()[0].upper()
        except ConfigError as e:
            log_level = ConfigSchema.LOG_LEVEL.default
            logger.warning(f"{e}; using {log_level}")
        return LoggingConfig(
            log_level=log_level,
            log_request_metrics=load_env_var(ConfigSchema.LOG_REQUEST_METRICS),
        )
