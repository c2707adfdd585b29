"""Wire-format constants shared by both conversion paths."""


class Constants:
    ROLE_SYSTEM = "system"
    ROLE_DEVELOPER = "developer"
    ROLE_USER = "user"
    ROLE_ASSISTANT = "assistant"
    ROLE_TOOL = "tool"

    # Chat-Completions content part types
    CONTENT_TEXT = "text"
    CONTENT_IMAGE_URL = "image_url"
    CONTENT_FILE = "file"

    # Responses content part types
    CONTENT_INPUT_TEXT = "input_text"
    CONTENT_OUTPUT_TEXT = "output_text"
    CONTENT_INPUT_IMAGE = "input_image"

    # Responses input item types
    ITEM_MESSAGE = "message"
    ITEM_FUNCTION_CALL = "function_call"
    ITEM_FUNCTION_CALL_OUTPUT = "function_call_output"

    TOOL_FUNCTION = "function"

    FORMAT_TEXT = "text"
    FORMAT_JSON_SCHEMA = "json_schema"

    REASONING_SUMMARY_AUTO = "auto"
    INCLUDE_ENCRYPTED_REASONING = "reasoning.encrypted_content"

    # Backend limit for tool names and call identifiers
    IDENTIFIER_MAX_LENGTH = 64
    MCP_NAME_PREFIX = "mcp__"
    MCP_NAME_SEPARATOR = "__"
    CALL_ID_PREFIX = "call_"

    # Chat-Completions fields the backend does not accept
    CHAT_UNFORWARDED_FIELDS = (
        "max_tokens",
        "max_completion_tokens",
        "temperature",
        "top_p",
        "top_k",
    )

    # Responses fields stripped before forwarding
    RESPONSES_UNSUPPORTED_FIELDS = (
        "max_output_tokens",
        "max_completion_tokens",
        "temperature",
        "top_p",
        "service_tier",
        "user",
    )
