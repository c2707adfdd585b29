"""Declarative schema for environment variable configuration.

This module provides a single source of truth for all environment variables,
with their defaults, validators and the generated Markdown reference.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_REASONING_EFFORTS = ("none", "minimal", "low", "medium", "high", "xhigh")


@dataclass(frozen=True)
class EnvVarSpec:
    """Specification for a single environment variable.

    Attributes:
        name: Environment variable name (e.g., "LOG_LEVEL")
        default: Default value if env var not set
        type_hint: str or bool; bool values accept true/1/yes/on
        description: Human-readable description for docs
        validator: Optional custom validation function
    """

    name: str
    default: Any
    type_hint: type
    description: str
    validator: Callable[[Any], bool] | None = None


class ConfigSchema:
    """Registry of all configuration environment variables."""

    # === Logging Settings ===

    LOG_LEVEL = EnvVarSpec(
        name="LOG_LEVEL",
        default="INFO",
        type_hint=str,
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        validator=lambda x: x.split()[0].upper() in VALID_LOG_LEVELS,
    )

    LOG_REQUEST_METRICS = EnvVarSpec(
        name="LOG_REQUEST_METRICS",
        default=False,
        type_hint=bool,
        description="Log per-conversion metrics (item counts, shortened identifiers)",
    )

    # === Conversion Settings ===

    CODEX_STRICT_CONVERSION = EnvVarSpec(
        name="CODEX_STRICT_CONVERSION",
        default=False,
        type_hint=bool,
        description="Raise ConversionError on malformed or unsupported input instead of skipping it",
    )

    CODEX_DEFAULT_REASONING_EFFORT = EnvVarSpec(
        name="CODEX_DEFAULT_REASONING_EFFORT",
        default="medium",
        type_hint=str,
        description="reasoning.effort used when a chat request has no reasoning_effort",
        validator=lambda x: x in VALID_REASONING_EFFORTS,
    )

    @classmethod
    def all_specs(cls) -> dict[str, EnvVarSpec]:
        """Get all environment variable specifications.

        Returns:
            Dictionary mapping spec names to EnvVarSpec objects
        """
        return {
            name: getattr(cls, name)
            for name in dir(cls)
            if isinstance(getattr(cls, name), EnvVarSpec)
        }

    @classmethod
    def generate_markdown_docs(cls) -> str:
        """Generate Markdown documentation for all environment variables."""
        lines = ["# Configuration Options\n\n"]
        lines.extend(
            [
                "This document is auto-generated from `ConfigSchema`.\n\n",
                "## Environment Variables\n\n",
            ]
        )

        for _name, spec in sorted(cls.all_specs().items()):
            default_repr = f"`{spec.default}`" if spec.default is not None else "None"
            lines.extend(
                [
                    f"### `{spec.name}`\n\n",
                    f"- **Type**: `{spec.type_hint.__name__}`\n",
                    f"- **Default**: {default_repr}\n",
                    f"- **Description**: {spec.description}\n\n",
                ]
            )

        return "\n".join(lines)
