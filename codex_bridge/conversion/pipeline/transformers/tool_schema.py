"""Tool schema transformer.

Flattens chat function tools into the Responses tool shape.
"""

import copy
from typing import Any

from codex_bridge.conversion.chat_to_responses import convert_function_tool
from codex_bridge.conversion.pipeline.base import ConversionContext, RequestTransformer
from codex_bridge.core.constants import Constants
from codex_bridge.core.error_types import ConversionErrorType


class ToolSchemaTransformer(RequestTransformer):
    """Converts chat tools to Responses tools.

    Chat-Completions nests function details under "function"; Responses keeps
    them at the top level. Built-in tools (e.g. {"type": "web_search"}) are
    already Responses-compatible and pass through unchanged.
    """

    def transform(self, context: ConversionContext) -> ConversionContext:
        tools = context.source.get("tools", None)
        if tools is not None and not isinstance(tools, list):
            context.reject(ConversionErrorType.MALFORMED_FIELD, "tools is not a list", "tools")
            return context
        if not tools:
            return context

        responses_tools: list[dict[str, Any]] = []
        for i, tool in enumerate(tools):
            path = f"tools.{i}"
            if not isinstance(tool, dict):
                context.reject(ConversionErrorType.MALFORMED_TOOL, "tool is not an object", path)
                continue

            tool_type = tool.get("type")
            if tool_type == Constants.TOOL_FUNCTION:
                responses_tools.append(convert_function_tool(context, tool, path))
            elif isinstance(tool_type, str) and tool_type:
                responses_tools.append(copy.deepcopy(tool))
            else:
                context.reject(ConversionErrorType.MALFORMED_TOOL, "tool has no type", f"{path}.type")

        new_request = {**context.target, "tools": responses_tools}
        return context.with_target(new_request)
