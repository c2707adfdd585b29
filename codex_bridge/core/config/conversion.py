"""Conversion configuration module.

Holds the defaults both converters fall back to when a caller does not pass
an explicit value.
"""

from dataclasses import dataclass

from codex_bridge.core.config.schema import ConfigSchema
from codex_bridge.core.config.validation import load_env_var


@dataclass(frozen=True)
class ConversionConfig:
    """Conversion settings.

    Attributes:
        strict_conversion: Raise ConversionError instead of skipping bad input
        default_reasoning_effort: reasoning.effort when the request has none
    """

    strict_conversion: bool
    default_reasoning_effort: str


class ConversionSettings:
    @staticmethod
    def load() -> ConversionConfig:
        """Load conversion configuration.

        Raises:
            ConfigError: If any environment variable fails validation
        """
        return ConversionConfig(
            strict_conversion=load_env_var(ConfigSchema.CODEX_STRICT_CONVERSION),
            default_reasoning_effort=load_env_var(ConfigSchema.CODEX_DEFAULT_REASONING_EFFORT),
        )
