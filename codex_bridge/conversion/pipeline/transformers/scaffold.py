"""Scaffold transformer.

Writes the fixed fields every Codex request carries.
"""

from codex_bridge.conversion.pipeline.base import ConversionContext, RequestTransformer
from codex_bridge.core.constants import Constants


class ResponsesScaffoldTransformer(RequestTransformer):
    """Adds the fixed Responses request fields.

    - instructions: always empty, system text travels as developer messages
    - reasoning.effort: the request's reasoning_effort, else the configured default
    - reasoning.summary, parallel_tool_calls, include, store: fixed values
    - model and stream: taken from the caller, not from the request body
    """

    def transform(self, context: ConversionContext) -> ConversionContext:
        # Import config lazily to avoid circular imports
        from codex_bridge.core.config.accessors import default_reasoning_effort

        if context.source.exists("reasoning_effort"):
            effort = context.source.get("reasoning_effort", None)
        else:
            effort = default_reasoning_effort()

        new_request = {
            **context.target,
            "instructions": "",
            "stream": context.stream,
            "reasoning": {
                "effort": effort,
                "summary": Constants.REASONING_SUMMARY_AUTO,
            },
            "parallel_tool_calls": True,
            "include": [Constants.INCLUDE_ENCRYPTED_REASONING],
            "model": context.model,
            "store": False,
        }
        return context.with_target(new_request)
