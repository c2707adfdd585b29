"""Request conversion for the Codex Responses backend.

Two entry points, one per incoming schema:
- convert_openai_request_to_codex: Chat-Completions -> Responses
- convert_openai_responses_request_to_codex: Responses -> normalized Responses
"""

from codex_bridge.conversion.chat_to_responses import (
    build_codex_request,
    convert_openai_request_to_codex,
)
from codex_bridge.conversion.responses_normalizer import (
    convert_openai_responses_request_to_codex,
    normalize_codex_request,
)

__all__ = [
    "build_codex_request",
    "convert_openai_request_to_codex",
    "convert_openai_responses_request_to_codex",
    "normalize_codex_request",
]
