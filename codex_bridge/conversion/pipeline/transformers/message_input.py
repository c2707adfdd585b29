"""Message input transformer.

Converts chat messages into the ordered Responses ``input`` array.
"""

from typing import Any

from codex_bridge.conversion.chat_to_responses import (
    convert_chat_message,
    convert_tool_calls,
    convert_tool_message,
)
from codex_bridge.conversion.pipeline.base import ConversionContext, RequestTransformer
from codex_bridge.core.constants import Constants
from codex_bridge.core.error_types import ConversionErrorType


class MessageInputTransformer(RequestTransformer):
    """Converts chat messages to Responses input items.

    Key complexities:
    - Tool messages: become top-level function_call_output items
    - Assistant messages: tool_calls are lifted out into function_call items
      placed right after the message item, in call order
    - System messages: become developer messages
    """

    def transform(self, context: ConversionContext) -> ConversionContext:
        input_items: list[dict[str, Any]] = []

        messages = context.source.get("messages", None)
        if messages is not None and not isinstance(messages, list):
            context.reject(ConversionErrorType.MALFORMED_FIELD, "messages is not a list", "messages")
            messages = None

        for i, msg in enumerate(messages or []):
            path = f"messages.{i}"
            if not isinstance(msg, dict):
                context.reject(ConversionErrorType.MALFORMED_MESSAGE, "message is not an object", path)
                continue

            if msg.get("role") == Constants.ROLE_TOOL:
                input_items.append(convert_tool_message(context, msg, path))
                continue

            input_items.append(convert_chat_message(context, msg, path))
            if msg.get("role") == Constants.ROLE_ASSISTANT:
                input_items.extend(convert_tool_calls(context, msg, path))

        new_request = {**context.target, "input": input_items}
        return context.with_target(new_request)
