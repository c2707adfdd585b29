"""Error types for request conversion.

Conversions are lenient by default and never raise. When strict conversion is
enabled, the first offending value raises a ConversionError tagged with one of
the ConversionErrorType values below.
"""

from enum import Enum


class ConversionErrorType(str, Enum):
    """Error categories raised by strict conversion.

    When adding new error types:
    1. Add the enum value here
    2. Raise it through ConversionContext.reject() so lenient mode still logs it
    """

    # Whole-document errors
    MALFORMED_REQUEST = "malformed_request"  # Body is not JSON or not an object
    MALFORMED_FIELD = "malformed_field"  # Known field has the wrong type
    UNSUPPORTED_FIELD = "unsupported_field"  # Field the backend rejects

    # Message errors
    MALFORMED_MESSAGE = "malformed_message"
    MALFORMED_CONTENT_PART = "malformed_content_part"
    UNSUPPORTED_CONTENT_PART = "unsupported_content_part"

    # Tool errors
    MALFORMED_TOOL = "malformed_tool"
    MALFORMED_TOOL_CALL = "malformed_tool_call"

    # Structured output
    UNSUPPORTED_RESPONSE_FORMAT = "unsupported_response_format"


class ConversionError(Exception):
    """Strict-mode conversion failure.

    Attributes:
        error_type: The ConversionErrorType category
        message: Human-readable error message
        path: Dotted JSON path of the offending value ("" for the whole body)
    """

    def __init__(self, error_type: ConversionErrorType, message: str, path: str = "") -> None:
        self.error_type = error_type
        self.message = message
        self.path = path
        location = f" at '{path}'" if path else ""
        super().__init__(f"[{error_type.value}] {message}{location}")
