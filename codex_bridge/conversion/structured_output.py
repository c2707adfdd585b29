"""Structured output mapping.

Chat-Completions carries output constraints in ``response_format`` (plus an
optional ``text.verbosity``); Responses expects them under ``text.format`` and
``text.verbosity``.
"""

from typing import Any

from codex_bridge.conversion.document import JsonDocument, dumps
from codex_bridge.core.constants import Constants


def map_structured_output(
    response_format: dict[str, Any] | None,
    text: dict[str, Any] | None,
) -> dict[str, Any] | None:
    """Build the Responses ``text`` object.

    Args:
        response_format: The request's ``response_format`` object, if any.
        text: The request's ``text`` object, if any.

    Returns:
        The ``text`` object for the Responses request, or None when the
        request carries neither field. A ``response_format`` always yields a
        ``text`` object, even if its type cannot be mapped.
    """
    out: JsonDocument | None = None

    if response_format is not None:
        out = JsonDocument()
        rf = JsonDocument(response_format)
        format_type = rf.get_str("type", "")

        if format_type == Constants.FORMAT_TEXT:
            out.set("format.type", Constants.FORMAT_TEXT)
        elif format_type == Constants.FORMAT_JSON_SCHEMA and rf.get_dict("json_schema") is not None:
            out.set("format.type", Constants.FORMAT_JSON_SCHEMA)
            if rf.exists("json_schema.name"):
                out.set("format.name", rf.get("json_schema.name"))
            if rf.exists("json_schema.strict"):
                out.set("format.strict", rf.get("json_schema.strict"))
            if rf.exists("json_schema.schema"):
                # Substituted as raw JSON so the schema is never rewritten
                out.set_raw("format.schema", dumps(rf.get("json_schema.schema")))

    if text is not None and "verbosity" in text:
        if out is None:
            out = JsonDocument()
        out.set("verbosity", text["verbosity"])

    return out.data if out is not None else None


def is_supported_response_format(response_format: dict[str, Any]) -> bool:
    return response_format.get("type") in (Constants.FORMAT_TEXT, Constants.FORMAT_JSON_SCHEMA)
