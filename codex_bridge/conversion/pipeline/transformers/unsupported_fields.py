"""Unsupported fields transformer.

Handles request fields the Codex backend rejects.
"""

from codex_bridge.conversion.document import JsonDocument
from codex_bridge.conversion.pipeline.base import ConversionContext, RequestTransformer
from codex_bridge.core.error_types import ConversionErrorType


class UnsupportedFieldsTransformer(RequestTransformer):
    """Reports, and optionally strips, fields the backend does not accept.

    The chat path builds its request from scratch, so it only needs the
    report (strip=False). The Responses path forwards the caller's document
    and has to delete them (strip=True).
    """

    def __init__(self, fields: tuple[str, ...], strip: bool) -> None:
        self.fields = fields
        self.strip = strip

    def transform(self, context: ConversionContext) -> ConversionContext:
        present = [field for field in self.fields if context.source.exists(field)]
        for field in present:
            context.reject(
                ConversionErrorType.UNSUPPORTED_FIELD,
                "field is not accepted by the backend and was dropped",
                field,
            )

        if not self.strip:
            return context

        new_request = JsonDocument(dict(context.target))
        for field in self.fields:
            new_request.delete(field)
        return context.with_target(new_request.data)
