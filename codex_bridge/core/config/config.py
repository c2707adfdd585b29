"""Configuration object for Codex Bridge.

Configuration is organized into focused modules:
- observability: log level and request metrics logging
- conversion: strict mode and conversion defaults

Each group is loaded from the environment the first time one of its values is
read, so a bad LOG_LEVEL cannot break a request conversion.
"""

from functools import cached_property

from codex_bridge.core.config.conversion import ConversionConfig, ConversionSettings
from codex_bridge.core.config.observability import LoggingConfig, LoggingSettings


class Config:
    """Direct property access to all settings.

    Values are validated against the schema when their group is first read.

    Raises:
        ConfigError: From a property whose group fails validation.
    """

    @cached_property
    def _logging(self) -> LoggingConfig:
        return LoggingSettings.load()

    @cached_property
    def _conversion(self) -> ConversionConfig:
        return ConversionSettings.load()

    # Logging settings
    @property
    def log_level(self) -> str:
        return self._logging.log_level

    @property
    def log_request_metrics(self) -> bool:
        return self._logging.log_request_metrics

    # Conversion settings
    @property
    def strict_conversion(self) -> bool:
        return self._conversion.strict_conversion

    @property
    def default_reasoning_effort(self) -> str:
        return self._conversion.default_reasoning_effort

    def as_dict(self) -> dict[str, object]:
        """Flat view of every setting, used by the CLI."""
        return {
            "log_level": self.log_level,
            "log_request_metrics": self.log_request_metrics,
            "strict_conversion": self.strict_conversion,
            "default_reasoning_effort": self.default_reasoning_effort,
        }
