"""Configuration package.

Import the Config class or the runtime accessors from here.
"""

from codex_bridge.core.config.accessors import (
    config_context,
    default_reasoning_effort,
    get_config,
    log_level,
    log_request_metrics,
    reset_global_config,
    strict_conversion,
)
from codex_bridge.core.config.config import Config
from codex_bridge.core.config.schema import ConfigSchema, EnvVarSpec
from codex_bridge.core.config.validation import ConfigError, load_env_var, validate_all

__all__ = [
    "Config",
    "ConfigError",
    "ConfigSchema",
    "EnvVarSpec",
    "config_context",
    "default_reasoning_effort",
    "get_config",
    "load_env_var",
    "log_level",
    "log_request_metrics",
    "reset_global_config",
    "strict_conversion",
    "validate_all",
]
