"""Responses request normalization.

A request already in Responses shape only needs fixing up before Codex will
take it: a bare string input is wrapped, required flags are forced, rejected
fields are stripped, system roles become developer, and over-length call ids
are shortened.
"""

import copy
import time
from typing import Any

from codex_bridge.conversion.conversion_metrics import (
    collect_conversion_metrics,
    log_conversion_metrics,
)
from codex_bridge.conversion.document import JsonDocument, parse_request_body
from codex_bridge.conversion.identifiers import IdentifierRegistry
from codex_bridge.core.config.accessors import log_request_metrics, strict_conversion
from codex_bridge.core.logging import ConversationLogger

conversation_logger = ConversationLogger.get_logger()

DIRECTION = "responses"


def convert_openai_responses_request_to_codex(
    model_name: str, raw_json: bytes, stream: bool
) -> bytes:
    """Normalize a Responses request body for the Codex backend.

    ``model_name`` and ``stream`` are accepted for parity with the chat entry
    point; the document keeps its own model and is always streamed.

    Raises:
        ConversionError: Only when strict conversion is configured.
    """
    strict = strict_conversion()
    source = parse_request_body(raw_json, strict)
    return JsonDocument(_normalize(model_name, source, strict)).to_bytes()


def normalize_codex_request(
    model_name: str,
    payload: dict[str, Any],
    stream: bool,
    *,
    strict: bool | None = None,
) -> dict[str, Any]:
    """Dict-level variant of convert_openai_responses_request_to_codex.

    Works on a deep copy; ``payload`` is left untouched.
    """
    if strict is None:
        strict = strict_conversion()
    return _normalize(model_name, JsonDocument(payload), strict)


def _normalize(model_name: str, source: JsonDocument, strict: bool) -> dict[str, Any]:
    from codex_bridge.conversion.pipeline import ConversionContext, RequestPipelineFactory

    started = time.perf_counter()
    context = ConversionContext(
        source=source,
        model=model_name,
        stream=True,
        strict=strict,
        registry=IdentifierRegistry(),
        target=copy.deepcopy(source.data),
    )

    pipeline = RequestPipelineFactory.create_responses_normalizer()
    result = pipeline.run(context)

    if log_request_metrics():
        source_input = source.get("input", None)
        if isinstance(source_input, list):
            source_item_count = len(source_input)
        else:
            source_item_count = 0 if source_input is None else 1
        metrics = collect_conversion_metrics(
            DIRECTION,
            result,
            source_item_count=source_item_count,
            started=started,
        )
        log_conversion_metrics(conversation_logger, metrics)
    return result.target
