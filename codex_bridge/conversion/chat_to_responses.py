"""Chat-Completions to Responses request conversion.

Builds a Codex Responses request from an OpenAI Chat-Completions request:
messages become ordered ``input`` items, assistant ``tool_calls`` and ``tool``
messages become top-level ``function_call``/``function_call_output`` items,
function tools are flattened, and ``response_format`` moves to ``text.format``.
"""

import copy
import time
from typing import TYPE_CHECKING, Any

from codex_bridge.conversion.conversion_metrics import (
    collect_conversion_metrics,
    log_conversion_metrics,
)
from codex_bridge.conversion.document import JsonDocument, as_text, parse_request_body
from codex_bridge.conversion.identifiers import IdentifierRegistry
from codex_bridge.core.config.accessors import log_request_metrics, strict_conversion
from codex_bridge.core.constants import Constants
from codex_bridge.core.error_types import ConversionErrorType
from codex_bridge.core.logging import ConversationLogger

if TYPE_CHECKING:
    from codex_bridge.conversion.pipeline.base import ConversionContext

conversation_logger = ConversationLogger.get_logger()

DIRECTION = "chat_completions"


def convert_openai_request_to_codex(model_name: str, raw_json: bytes, stream: bool) -> bytes:
    """Convert a Chat-Completions request body into a Responses request body.

    Args:
        model_name: The model to write into the outgoing request.
        raw_json: The raw Chat-Completions request JSON.
        stream: Whether the outgoing request streams.

    Returns:
        The Responses request JSON.

    Raises:
        ConversionError: Only when strict conversion is configured.
    """
    strict = strict_conversion()
    source = parse_request_body(raw_json, strict)
    return JsonDocument(_convert(model_name, source, stream, strict)).to_bytes()


def build_codex_request(
    model_name: str,
    payload: dict[str, Any],
    stream: bool,
    *,
    strict: bool | None = None,
) -> dict[str, Any]:
    """Dict-level variant of convert_openai_request_to_codex.

    The payload is never modified; the result is a newly built dict.
    ``strict=None`` uses the configured default.
    """
    if strict is None:
        strict = strict_conversion()
    return _convert(model_name, JsonDocument(payload), stream, strict)


def _convert(model_name: str, source: JsonDocument, stream: bool, strict: bool) -> dict[str, Any]:
    started = time.perf_counter()
    context = _build_initial_context(source, model_name, stream, strict)

    from codex_bridge.conversion.pipeline import RequestPipelineFactory

    pipeline = RequestPipelineFactory.create_chat_completions()
    result = pipeline.run(context)

    if log_request_metrics():
        metrics = collect_conversion_metrics(
            DIRECTION,
            result,
            source_item_count=len(source.get_list("messages", []) or []),
            started=started,
        )
        log_conversion_metrics(conversation_logger, metrics)
    return result.target


def _build_initial_context(
    source: JsonDocument, model_name: str, stream: bool, strict: bool
) -> "ConversionContext":
    from codex_bridge.conversion.pipeline.base import ConversionContext

    return ConversionContext(
        source=source,
        model=model_name,
        stream=stream,
        strict=strict,
        registry=IdentifierRegistry(),
        target={},
    )


def collect_declared_tool_names(context: "ConversionContext") -> list[str]:
    """Names of every function-type tool, in declaration order."""
    names: list[str] = []
    for tool in context.source.get_list("tools", []) or []:
        if not isinstance(tool, dict) or tool.get("type") != Constants.TOOL_FUNCTION:
            continue
        function = tool.get("function")
        if isinstance(function, dict) and isinstance(function.get("name"), str):
            names.append(function["name"])
    return names


def resolve_tool_name(context: "ConversionContext", name: str) -> str:
    """Alias for a tool name referenced by a call or by tool_choice."""
    if not context.registry.is_declared(name):
        conversation_logger.debug(f"Tool {name!r} is referenced but not declared in tools")
    return context.registry.tool_name(name)


def text_part_type(role: str) -> str:
    """Text the model produced is output_text; everything else is input_text."""
    if role == Constants.ROLE_ASSISTANT:
        return Constants.CONTENT_OUTPUT_TEXT
    return Constants.CONTENT_INPUT_TEXT


def convert_tool_message(
    context: "ConversionContext", msg: dict[str, Any], path: str
) -> dict[str, Any]:
    """Convert a tool-role message into a function_call_output item."""
    tool_call_id = as_text(msg.get("tool_call_id"), "")
    if not tool_call_id:
        context.reject(
            ConversionErrorType.MALFORMED_MESSAGE,
            "tool message has no tool_call_id",
            f"{path}.tool_call_id",
        )

    return {
        "type": Constants.ITEM_FUNCTION_CALL_OUTPUT,
        "call_id": context.registry.call_id(tool_call_id),
        "output": as_text(msg.get("content"), ""),
    }


def convert_content_parts(
    context: "ConversionContext", role: str, content: Any, path: str
) -> list[dict[str, Any]]:
    """Convert message content (string or part list) into Responses parts."""
    if isinstance(content, str):
        if not content:
            return []
        return [{"type": text_part_type(role), "text": content}]

    if content is None:
        return []

    if not isinstance(content, list):
        context.reject(
            ConversionErrorType.MALFORMED_MESSAGE,
            f"content must be a string or a list, got {type(content).__name__}",
            path,
        )
        return []

    parts: list[dict[str, Any]] = []
    for j, part in enumerate(content):
        part_path = f"{path}.{j}"
        if not isinstance(part, dict):
            context.reject(
                ConversionErrorType.MALFORMED_CONTENT_PART,
                "content part is not an object",
                part_path,
            )
            continue

        part_type = part.get("type")
        if part_type == Constants.CONTENT_TEXT:
            parts.append({"type": text_part_type(role), "text": as_text(part.get("text"), "")})
        elif part_type == Constants.CONTENT_IMAGE_URL:
            if role != Constants.ROLE_USER:
                context.reject(
                    ConversionErrorType.UNSUPPORTED_CONTENT_PART,
                    f"image_url parts are only accepted on user messages, not {role!r}",
                    part_path,
                )
                continue
            parts.append(convert_image_part(part))
        elif part_type == Constants.CONTENT_FILE:
            # No Responses representation for chat file parts
            context.reject(
                ConversionErrorType.UNSUPPORTED_CONTENT_PART,
                "file parts are not supported",
                part_path,
            )
        else:
            context.reject(
                ConversionErrorType.MALFORMED_CONTENT_PART,
                f"unknown content part type {part_type!r}",
                part_path,
            )
    return parts


def convert_image_part(part: dict[str, Any]) -> dict[str, Any]:
    """Convert a chat image_url part into an input_image part."""
    image: dict[str, Any] = {"type": Constants.CONTENT_INPUT_IMAGE}
    image_url = part.get("image_url")
    if isinstance(image_url, str):
        image["image_url"] = image_url
    elif isinstance(image_url, dict):
        if "url" in image_url:
            image["image_url"] = as_text(image_url["url"], "")
        if isinstance(image_url.get("detail"), str):
            image["detail"] = image_url["detail"]
    return image


def convert_chat_message(
    context: "ConversionContext", msg: dict[str, Any], path: str
) -> dict[str, Any]:
    """Convert a non-tool message into a Responses message item."""
    role = msg.get("role")
    if not isinstance(role, str):
        context.reject(
            ConversionErrorType.MALFORMED_MESSAGE,
            "message has no string role",
            f"{path}.role",
        )
        role = ""

    return {
        "type": Constants.ITEM_MESSAGE,
        "role": Constants.ROLE_DEVELOPER if role == Constants.ROLE_SYSTEM else role,
        "content": convert_content_parts(context, role, msg.get("content"), f"{path}.content"),
    }


def convert_tool_calls(
    context: "ConversionContext", msg: dict[str, Any], path: str
) -> list[dict[str, Any]]:
    """Extract an assistant message's tool_calls as function_call items."""
    tool_calls = msg.get("tool_calls")
    if tool_calls is None:
        return []
    if not isinstance(tool_calls, list):
        context.reject(
            ConversionErrorType.MALFORMED_MESSAGE,
            "tool_calls is not a list",
            f"{path}.tool_calls",
        )
        return []

    items: list[dict[str, Any]] = []
    for j, tc in enumerate(tool_calls):
        tc_path = f"{path}.tool_calls.{j}"
        if not isinstance(tc, dict) or tc.get("type") != Constants.TOOL_FUNCTION:
            context.reject(
                ConversionErrorType.MALFORMED_TOOL_CALL,
                "tool call is not a function call",
                tc_path,
            )
            continue

        call = JsonDocument(tc)
        call_id = as_text(call.get("id", None), "")
        name = as_text(call.get("function.name", None), "")
        if not call_id or not name:
            context.reject(
                ConversionErrorType.MALFORMED_TOOL_CALL,
                "tool call needs an id and a function name",
                tc_path,
            )

        items.append(
            {
                "type": Constants.ITEM_FUNCTION_CALL,
                "call_id": context.registry.call_id(call_id),
                "name": resolve_tool_name(context, name),
                "arguments": as_text(call.get("function.arguments", None), ""),
            }
        )
    return items


def convert_function_tool(
    context: "ConversionContext", tool: dict[str, Any], path: str
) -> dict[str, Any]:
    """Flatten a chat function tool into the Responses tool shape."""
    item: dict[str, Any] = {"type": Constants.TOOL_FUNCTION}
    function = tool.get("function")
    if not isinstance(function, dict):
        context.reject(
            ConversionErrorType.MALFORMED_TOOL,
            "function tool has no function object",
            f"{path}.function",
        )
        return item

    if "name" in function:
        item["name"] = context.registry.tool_name(as_text(function["name"], ""))
    else:
        context.reject(
            ConversionErrorType.MALFORMED_TOOL,
            "function tool has no name",
            f"{path}.function.name",
        )
    for key in ("description", "parameters", "strict"):
        if key in function:
            item[key] = copy.deepcopy(function[key])
    return item
