"""String input transformer.

Responses accepts ``input`` as a bare string; Codex only takes the item list.
"""

from codex_bridge.conversion.document import JsonDocument
from codex_bridge.conversion.pipeline.base import ConversionContext, RequestTransformer
from codex_bridge.core.constants import Constants
from codex_bridge.core.error_types import ConversionErrorType


class StringInputTransformer(RequestTransformer):
    """Wraps a bare string input into a single user message item."""

    def transform(self, context: ConversionContext) -> ConversionContext:
        value = context.target.get("input")

        if isinstance(value, str):
            message = JsonDocument({"type": Constants.ITEM_MESSAGE, "role": Constants.ROLE_USER})
            message.append("content", {"type": Constants.CONTENT_INPUT_TEXT, "text": value})
            return context.with_target({**context.target, "input": [message.data]})

        if value is not None and not isinstance(value, list):
            context.reject(
                ConversionErrorType.MALFORMED_FIELD,
                "input is neither a string nor a list",
                "input",
            )
        return context
