"""Runtime config value accessors.

These functions provide config values at runtime without requiring direct
config imports, so converters pick up a scoped override when one is active.

Config Context Propagation:
    Config is propagated via ContextVar. ``config_context()`` sets a scoped
    config; outside of it a lazily created global Config is used.

Usage:
    from codex_bridge.core.config.accessors import strict_conversion
    if strict_conversion():
        ...
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config

_config_context: ContextVar[Config | None] = ContextVar("config_context", default=None)
_global_config: Config | None = None


def _get_config_from_context() -> Config | None:
    return _config_context.get(None)


def _get_global_fallback() -> Config:
    """Fallback to a module-level config outside any scoped context."""
    global _global_config
    if _global_config is None:
        # Lazy import to avoid circular dependency
        from .config import Config

        _global_config = Config()
    return _global_config


def get_config() -> Config:
    cfg = _get_config_from_context()
    if cfg is None:
        cfg = _get_global_fallback()
    return cfg


def reset_global_config() -> None:
    """Drop the cached global config so the next access re-reads the environment."""
    global _global_config
    _global_config = None


@contextmanager
def config_context(cfg: Config) -> Iterator[Config]:
    """Scope ``cfg`` as the active config for the enclosed block."""
    token = _config_context.set(cfg)
    try:
        yield cfg
    finally:
        _config_context.reset(token)


def log_request_metrics() -> bool:
    """Get the log_request_metrics config value."""
    return get_config().log_request_metrics


def strict_conversion() -> bool:
    """Get the strict_conversion config value."""
    return get_config().strict_conversion


def default_reasoning_effort() -> str:
    """Get the default_reasoning_effort config value."""
    return get_config().default_reasoning_effort


def log_level() -> str:
    """Get the log_level config value."""
    return get_config().log_level
