"""Call id transformer."""

from typing import Any

from codex_bridge.conversion.pipeline.base import ConversionContext, RequestTransformer


class CallIdTransformer(RequestTransformer):
    """Shortens over-length call ids on input items.

    All items share the context registry, so a function_call and its
    function_call_output keep matching ids after shortening.
    """

    def transform(self, context: ConversionContext) -> ConversionContext:
        items = context.target.get("input")
        if not isinstance(items, list):
            return context

        converted: list[Any] = []
        for item in items:
            call_id = item.get("call_id") if isinstance(item, dict) else None
            if isinstance(call_id, str) and call_id:
                short = context.registry.call_id(call_id)
                if short != call_id:
                    item = {**item, "call_id": short}
            converted.append(item)

        return context.with_target({**context.target, "input": converted})
