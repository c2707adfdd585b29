"""Shared pytest configuration and fixtures for Codex Bridge tests."""

import logging

import pytest

from codex_bridge.core.config import ConfigSchema, reset_global_config
from codex_bridge.core.logging import CorrelationFormatter


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests (fast, no external deps)")


def pytest_collection_modifyitems(config, items):
    """Add markers to tests based on their location."""
    for item in items:
        if "tests/unit/" in str(item.path):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(scope="function", autouse=True)
def isolated_config(monkeypatch):
    """Run every test against schema defaults.

    Clears every configuration variable and drops the cached global config so
    values set by one test (or the developer's shell) never leak into another.
    """
    for spec in ConfigSchema.all_specs().values():
        monkeypatch.delenv(spec.name, raising=False)
    reset_global_config()
    yield
    reset_global_config()


@pytest.fixture
def chat_request():
    """Multi-turn Chat-Completions request with a tool round trip."""
    return {
        "model": "gpt-4o",
        "messages": [
            {"role": "system", "content": "Be terse."},
            {"role": "user", "content": "What is the weather in Paris?"},
            {
                "role": "assistant",
                "content": None,
                "tool_calls": [
                    {
                        "id": "call_abc",
                        "type": "function",
                        "function": {"name": "get_weather", "arguments": '{"city":"Paris"}'},
                    }
                ],
            },
            {"role": "tool", "tool_call_id": "call_abc", "content": "18C and sunny"},
        ],
        "tools": [
            {
                "type": "function",
                "function": {
                    "name": "get_weather",
                    "description": "Look up the weather",
                    "parameters": {
                        "type": "object",
                        "properties": {"city": {"type": "string"}},
                        "required": ["city"],
                    },
                    "strict": True,
                },
            }
        ],
        "tool_choice": "auto",
        "temperature": 0.2,
        "max_tokens": 256,
    }


@pytest.fixture
def responses_request():
    """Responses request carrying every field the normalizer corrects."""
    return {
        "model": "gpt-5.2",
        "input": [
            {
                "type": "message",
                "role": "system",
                "content": [{"type": "input_text", "text": "You are a pirate."}],
            },
            {
                "type": "message",
                "role": "user",
                "content": [{"type": "input_text", "text": "Say hello."}],
            },
            {"type": "function_call", "call_id": "a" * 80, "name": "foo", "arguments": "{}"},
            {"type": "function_call_output", "call_id": "a" * 80, "output": "ok"},
        ],
        "stream": False,
        "store": True,
        "temperature": 0.7,
        "top_p": 0.9,
        "max_output_tokens": 1024,
        "service_tier": "priority",
        "user": "test-user",
        "tools": [{"type": "web_search"}],
    }


@pytest.fixture
def restore_root_logger():
    """Undo configure_root_logging() after a test that installs the handler."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler.formatter, CorrelationFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
