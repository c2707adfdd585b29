"""Tool choice transformer.

Maps Chat-Completions tool_choice to the Responses format.
"""

import copy
from typing import Any

from codex_bridge.conversion.chat_to_responses import resolve_tool_name
from codex_bridge.conversion.pipeline.base import ConversionContext, RequestTransformer
from codex_bridge.core.constants import Constants
from codex_bridge.core.error_types import ConversionErrorType


class ToolChoiceTransformer(RequestTransformer):
    """Converts chat tool_choice to Responses format.

    Chat-Completions:
    - "auto" / "none" / "required": string literal
    - {"type": "function", "function": {"name": "..."}}: specific function

    Responses:
    - string literals unchanged
    - {"type": "function", "name": "..."}: flattened, name mapped to its alias
    - built-in tool choices (e.g. {"type": "web_search"}) unchanged
    """

    def transform(self, context: ConversionContext) -> ConversionContext:
        if not context.source.exists("tool_choice"):
            return context

        tool_choice = context.source.get("tool_choice", None)
        choice: str | dict[str, Any] | None = None

        if isinstance(tool_choice, str):
            choice = tool_choice
        elif isinstance(tool_choice, dict):
            choice_type = tool_choice.get("type")
            if choice_type == Constants.TOOL_FUNCTION:
                choice = {"type": Constants.TOOL_FUNCTION}
                name = context.source.get_str("tool_choice.function.name", "")
                if name:
                    choice["name"] = resolve_tool_name(context, name)
            elif isinstance(choice_type, str) and choice_type:
                choice = copy.deepcopy(tool_choice)

        if choice is None:
            context.reject(
                ConversionErrorType.MALFORMED_FIELD,
                "tool_choice is neither a string nor a typed object",
                "tool_choice",
            )
            return context

        new_request = {**context.target, "tool_choice": choice}
        return context.with_target(new_request)
