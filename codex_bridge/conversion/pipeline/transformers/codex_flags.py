"""Codex flags transformer."""

from codex_bridge.conversion.pipeline.base import ConversionContext, RequestTransformer
from codex_bridge.core.constants import Constants


class CodexFlagsTransformer(RequestTransformer):
    """Forces the flags the Codex backend requires.

    Codex only serves streamed, non-persisted responses, so these override
    whatever the caller sent.
    """

    def transform(self, context: ConversionContext) -> ConversionContext:
        new_request = {
            **context.target,
            "stream": True,
            "store": False,
            "parallel_tool_calls": True,
            "include": [Constants.INCLUDE_ENCRYPTED_REASONING],
        }
        return context.with_target(new_request)
