"""Tool name registration transformer.

Shortens every declared function name before any message is converted, so a
tool definition, the calls that reference it and tool_choice all agree.
"""

from codex_bridge.conversion.chat_to_responses import collect_declared_tool_names
from codex_bridge.conversion.pipeline.base import ConversionContext, RequestTransformer


class ToolNameRegistrationTransformer(RequestTransformer):
    def transform(self, context: ConversionContext) -> ConversionContext:
        names = collect_declared_tool_names(context)
        if names:
            context.registry.register_tool_names(names)
        return context
