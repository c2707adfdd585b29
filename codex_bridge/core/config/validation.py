"""Environment variable loading against ConfigSchema.

Every setting is either a string checked by its spec's validator or a
boolean flag.
"""

import os
from typing import Any

from codex_bridge.core.config.schema import ConfigSchema, EnvVarSpec

TRUTHY_VALUES = ("true", "1", "yes", "on")


class ConfigError(Exception):
    """An environment variable holds a value its spec rejects.

    Attributes:
        env_var: Name of the offending variable
        value: The raw value as found in the environment
        message: What is wrong with it
    """

    def __init__(self, env_var: str, value: str, message: str) -> None:
        self.env_var = env_var
        self.value = value
        self.message = message
        super().__init__(f"{env_var}={value}: {message}")


def load_env_var(spec: EnvVarSpec) -> Any:
    """Read ``spec.name`` from the environment.

    Unset variables yield ``spec.default``. Boolean specs treat
    true/1/yes/on (any case) as True and anything else as False; string
    specs are returned as-is once their validator accepts them.

    Raises:
        ConfigError: If the validator rejects the value or cannot evaluate it
    """
    raw_value = os.environ.get(spec.name)
    if raw_value is None:
        return spec.default

    if spec.type_hint is bool:
        return raw_value.strip().lower() in TRUTHY_VALUES

    if spec.validator is None:
        return raw_value
    try:
        accepted = spec.validator(raw_value)
    except (TypeError, IndexError) as e:
        raise ConfigError(spec.name, raw_value, f"Validation error: {e}") from e
    if not accepted:
        raise ConfigError(spec.name, raw_value, "Validation failed")
    return raw_value


def validate_all() -> list[ConfigError]:
    """Load every schema variable and collect the ones that fail."""
    errors: list[ConfigError] = []
    for spec in ConfigSchema.all_specs().values():
        try:
            load_env_var(spec)
        except ConfigError as e:
            errors.append(e)
    return errors
