"""Structured output transformer.

Maps ``response_format`` and ``text.verbosity`` onto the Responses ``text``
object.
"""

from codex_bridge.conversion.pipeline.base import ConversionContext, RequestTransformer
from codex_bridge.conversion.structured_output import (
    is_supported_response_format,
    map_structured_output,
)
from codex_bridge.core.error_types import ConversionErrorType


class StructuredOutputTransformer(RequestTransformer):
    def transform(self, context: ConversionContext) -> ConversionContext:
        source = context.source

        response_format = source.get_dict("response_format", None)
        if response_format is None and source.exists("response_format"):
            context.reject(
                ConversionErrorType.MALFORMED_FIELD,
                "response_format is not an object",
                "response_format",
            )
        elif response_format is not None and not is_supported_response_format(response_format):
            context.reject(
                ConversionErrorType.UNSUPPORTED_RESPONSE_FORMAT,
                f"response_format type {response_format.get('type')!r} has no text.format mapping",
                "response_format.type",
            )

        text = source.get_dict("text", None)
        if text is None and source.exists("text"):
            context.reject(ConversionErrorType.MALFORMED_FIELD, "text is not an object", "text")

        mapped = map_structured_output(response_format, text)
        if mapped is None:
            return context

        new_request = {**context.target, "text": mapped}
        return context.with_target(new_request)
