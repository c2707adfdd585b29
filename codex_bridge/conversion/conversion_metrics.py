"""Per-conversion metrics.

Collected only when LOG_REQUEST_METRICS is enabled, then written as one line
on the conversation logger.
"""

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from codex_bridge.conversion.pipeline.base import ConversionContext


@dataclass
class ConversionMetrics:
    """Metrics for a single conversion"""

    direction: str
    model: str
    strict: bool
    source_item_count: int = 0
    input_item_count: int = 0
    tool_count: int = 0
    shortened_tool_names: int = 0
    shortened_call_ids: int = 0
    duration_ms: float = 0.0


def collect_conversion_metrics(
    direction: str,
    context: "ConversionContext",
    source_item_count: int,
    started: float,
) -> ConversionMetrics:
    target = context.target
    input_items: Any = target.get("input")
    tools: Any = target.get("tools")
    return ConversionMetrics(
        direction=direction,
        model=context.model,
        strict=context.strict,
        source_item_count=source_item_count,
        input_item_count=len(input_items) if isinstance(input_items, list) else 0,
        tool_count=len(tools) if isinstance(tools, list) else 0,
        shortened_tool_names=context.registry.shortened_tool_names,
        shortened_call_ids=context.registry.shortened_call_ids,
        duration_ms=(time.perf_counter() - started) * 1000,
    )


def log_conversion_metrics(logger: logging.Logger, metrics: ConversionMetrics) -> None:
    logger.info(
        f"🔁 CONVERT {metrics.direction} | "
        f"Model: {metrics.model} | "
        f"Items: {metrics.source_item_count} -> {metrics.input_item_count} | "
        f"Tools: {metrics.tool_count} | "
        f"Shortened names: {metrics.shortened_tool_names} | "
        f"Shortened call ids: {metrics.shortened_call_ids} | "
        f"Strict: {metrics.strict} | "
        f"{metrics.duration_ms:.1f}ms"
    )
