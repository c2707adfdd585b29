"""Codex Bridge

Translates Chat-Completions requests into Responses requests for the Codex
backend, and normalizes Responses requests the backend would reject.
"""

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("codex-bridge")
except PackageNotFoundError:
    # Fallback for source checkouts
    __version__ = "0.1.0"
__author__ = "Codex Bridge"

from codex_bridge.conversion import (  # noqa: E402
    build_codex_request,
    convert_openai_request_to_codex,
    convert_openai_responses_request_to_codex,
    normalize_codex_request,
)

__all__ = [
    "build_codex_request",
    "convert_openai_request_to_codex",
    "convert_openai_responses_request_to_codex",
    "normalize_codex_request",
]
