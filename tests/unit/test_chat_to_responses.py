"""Unit tests for Chat-Completions to Responses conversion."""

import copy
import json
import logging

import pytest

from codex_bridge.conversion.chat_to_responses import (
    build_codex_request,
    convert_openai_request_to_codex,
)
from codex_bridge.core.config import reset_global_config
from codex_bridge.core.error_types import ConversionError, ConversionErrorType

OUT_OF_RANGE_SCHEMA_BODY = (
    b'{"messages":[],"response_format":{"type":"json_schema",'
    b'"json_schema":{"schema":{"maximum":1e400}}}}'
)


def convert(payload, model="gpt-5-codex", stream=True):
    return build_codex_request(model, payload, stream)


@pytest.mark.unit
class TestScaffold:
    def test_fixed_fields(self):
        result = convert({"messages": []}, model="gpt-5-codex", stream=False)

        assert result["instructions"] == ""
        assert result["stream"] is False
        assert result["parallel_tool_calls"] is True
        assert result["reasoning"] == {"effort": "medium", "summary": "auto"}
        assert result["include"] == ["reasoning.encrypted_content"]
        assert result["store"] is False
        assert result["model"] == "gpt-5-codex"
        assert result["input"] == []

    def test_model_comes_from_caller(self, chat_request):
        result = convert(chat_request, model="gpt-5.1-codex-max")
        assert result["model"] == "gpt-5.1-codex-max"

    def test_reasoning_effort_copied_verbatim(self):
        result = convert({"messages": [], "reasoning_effort": "high"})
        assert result["reasoning"]["effort"] == "high"

    def test_default_effort_from_config(self, monkeypatch):
        monkeypatch.setenv("CODEX_DEFAULT_REASONING_EFFORT", "low")
        reset_global_config()
        assert convert({"messages": []})["reasoning"]["effort"] == "low"

    def test_sampling_and_token_fields_not_forwarded(self, chat_request):
        chat_request.update({"top_p": 0.5, "top_k": 3, "max_completion_tokens": 12})
        result = convert(chat_request)

        for field in ("max_tokens", "max_completion_tokens", "temperature", "top_p", "top_k"):
            assert field not in result

    def test_optional_sections_absent_when_not_requested(self):
        result = convert({"messages": [{"role": "user", "content": "Hi"}]})
        assert "tools" not in result
        assert "tool_choice" not in result
        assert "text" not in result


@pytest.mark.unit
class TestMessages:
    def test_system_and_user_messages(self):
        result = convert(
            {
                "messages": [
                    {"role": "system", "content": "Be terse."},
                    {"role": "user", "content": "Hi"},
                ]
            }
        )

        assert result["input"] == [
            {
                "type": "message",
                "role": "developer",
                "content": [{"type": "input_text", "text": "Be terse."}],
            },
            {
                "type": "message",
                "role": "user",
                "content": [{"type": "input_text", "text": "Hi"}],
            },
        ]

    def test_assistant_text_is_output_text(self):
        result = convert({"messages": [{"role": "assistant", "content": "Hello there"}]})
        assert result["input"][0]["content"] == [{"type": "output_text", "text": "Hello there"}]

    def test_empty_string_content_has_no_parts(self):
        result = convert({"messages": [{"role": "user", "content": ""}]})
        assert result["input"] == [{"type": "message", "role": "user", "content": []}]

    def test_assistant_tool_calls_follow_message(self):
        result = convert(
            {
                "messages": [
                    {
                        "role": "assistant",
                        "content": "Let me check.",
                        "tool_calls": [
                            {
                                "id": "abc",
                                "type": "function",
                                "function": {"name": "foo", "arguments": "{}"},
                            },
                            {
                                "id": "def",
                                "type": "function",
                                "function": {"name": "bar", "arguments": '{"x":1}'},
                            },
                        ],
                    }
                ]
            }
        )

        assert result["input"] == [
            {
                "type": "message",
                "role": "assistant",
                "content": [{"type": "output_text", "text": "Let me check."}],
            },
            {"type": "function_call", "call_id": "abc", "name": "foo", "arguments": "{}"},
            {"type": "function_call", "call_id": "def", "name": "bar", "arguments": '{"x":1}'},
        ]

    def test_tool_message_becomes_function_call_output(self):
        result = convert({"messages": [{"role": "tool", "tool_call_id": "abc", "content": "42"}]})
        assert result["input"] == [
            {"type": "function_call_output", "call_id": "abc", "output": "42"}
        ]

    def test_non_string_tool_content_and_arguments_become_json(self):
        result = convert(
            {
                "messages": [
                    {
                        "role": "assistant",
                        "tool_calls": [
                            {
                                "id": "c1",
                                "type": "function",
                                "function": {"name": "foo", "arguments": {"a": 1}},
                            }
                        ],
                    },
                    {"role": "tool", "tool_call_id": "c1", "content": [{"type": "text", "text": "x"}]},
                ]
            }
        )

        assert result["input"][1]["arguments"] == '{"a":1}'
        assert result["input"][2]["output"] == '[{"type":"text","text":"x"}]'

    def test_numeric_ids_and_text_are_stringified(self):
        result = convert(
            {
                "messages": [
                    {"role": "user", "content": [{"type": "text", "text": 5}]},
                    {
                        "role": "assistant",
                        "tool_calls": [
                            {
                                "id": 5,
                                "type": "function",
                                "function": {"name": "foo", "arguments": "{}"},
                            }
                        ],
                    },
                    {"role": "tool", "tool_call_id": 5, "content": "ok"},
                ]
            }
        )

        assert result["input"][0]["content"] == [{"type": "input_text", "text": "5"}]
        assert result["input"][2]["call_id"] == "5"
        assert result["input"][3]["call_id"] == "5"

    def test_full_round_trip_order(self, chat_request):
        result = convert(chat_request)
        kinds = [(item["type"], item.get("role")) for item in result["input"]]

        assert kinds == [
            ("message", "developer"),
            ("message", "user"),
            ("message", "assistant"),
            ("function_call", None),
            ("function_call_output", None),
        ]
        assert result["input"][2]["content"] == []
        assert result["input"][3]["call_id"] == result["input"][4]["call_id"] == "call_abc"

    def test_non_function_tool_calls_skipped(self):
        result = convert(
            {
                "messages": [
                    {
                        "role": "assistant",
                        "content": "",
                        "tool_calls": [{"id": "x", "type": "custom", "custom": {}}],
                    }
                ]
            }
        )
        assert [item["type"] for item in result["input"]] == ["message"]

    def test_non_object_messages_skipped(self):
        result = convert({"messages": ["oops", {"role": "user", "content": "Hi"}, 3]})
        assert len(result["input"]) == 1
        assert result["input"][0]["role"] == "user"


@pytest.mark.unit
class TestContentParts:
    def test_text_parts_in_order(self):
        result = convert(
            {
                "messages": [
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": "first"},
                            {"type": "text", "text": "second"},
                        ],
                    }
                ]
            }
        )
        assert result["input"][0]["content"] == [
            {"type": "input_text", "text": "first"},
            {"type": "input_text", "text": "second"},
        ]

    def test_image_url_object_on_user(self):
        result = convert(
            {
                "messages": [
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": "What is this?"},
                            {
                                "type": "image_url",
                                "image_url": {"url": "https://example.com/cat.png", "detail": "low"},
                            },
                        ],
                    }
                ]
            }
        )
        assert result["input"][0]["content"][1] == {
            "type": "input_image",
            "image_url": "https://example.com/cat.png",
            "detail": "low",
        }

    def test_image_url_string_on_user(self):
        result = convert(
            {
                "messages": [
                    {
                        "role": "user",
                        "content": [{"type": "image_url", "image_url": "data:image/png;base64,AAA"}],
                    }
                ]
            }
        )
        assert result["input"][0]["content"] == [
            {"type": "input_image", "image_url": "data:image/png;base64,AAA"}
        ]

    @pytest.mark.parametrize("role", ["assistant", "system", "developer"])
    def test_image_url_dropped_for_other_roles(self, role):
        result = convert(
            {
                "messages": [
                    {
                        "role": role,
                        "content": [
                            {"type": "image_url", "image_url": {"url": "https://example.com/a.png"}},
                            {"type": "text", "text": "kept"},
                        ],
                    }
                ]
            }
        )
        content = result["input"][0]["content"]
        assert len(content) == 1
        assert content[0]["text"] == "kept"

    def test_file_parts_dropped(self):
        result = convert(
            {
                "messages": [
                    {
                        "role": "user",
                        "content": [
                            {"type": "file", "file": {"file_id": "file-1"}},
                            {"type": "text", "text": "see file"},
                        ],
                    }
                ]
            }
        )
        assert result["input"][0]["content"] == [{"type": "input_text", "text": "see file"}]

    def test_unknown_and_malformed_parts_dropped(self):
        result = convert(
            {"messages": [{"role": "user", "content": [{"type": "audio"}, "bare", None]}]}
        )
        assert result["input"][0]["content"] == []


@pytest.mark.unit
class TestTools:
    def test_function_tool_flattened(self, chat_request):
        result = convert(chat_request)
        assert result["tools"] == [
            {
                "type": "function",
                "name": "get_weather",
                "description": "Look up the weather",
                "parameters": {
                    "type": "object",
                    "properties": {"city": {"type": "string"}},
                    "required": ["city"],
                },
                "strict": True,
            }
        ]

    def test_absent_fields_omitted(self):
        result = convert({"tools": [{"type": "function", "function": {"name": "ping"}}]})
        assert result["tools"] == [{"type": "function", "name": "ping"}]

    def test_builtin_tools_pass_through(self):
        web_search = {"type": "web_search", "search_context_size": "low"}
        result = convert({"tools": [web_search]})
        assert result["tools"] == [web_search]
        assert result["tools"][0] is not web_search

    def test_long_mcp_name_consistent_across_definition_and_call(self):
        name = "mcp__server__really_long_tool_name_" + "x" * 45
        assert len(name) == 80
        payload = {
            "messages": [
                {
                    "role": "assistant",
                    "tool_calls": [
                        {"id": "c1", "type": "function", "function": {"name": name, "arguments": "{}"}}
                    ],
                }
            ],
            "tools": [{"type": "function", "function": {"name": name}}],
            "tool_choice": {"type": "function", "function": {"name": name}},
        }

        result = convert(payload)
        alias = result["tools"][0]["name"]

        assert len(alias) <= 64
        assert alias.startswith("mcp__")
        assert result["input"][1]["name"] == alias
        assert result["tool_choice"] == {"type": "function", "name": alias}
        assert convert(payload)["tools"][0]["name"] == alias

    def test_declared_names_made_unique(self):
        first = "mcp__" + "alpha" * 14 + "__search"
        second = "mcp__" + "bravo" * 14 + "__search"
        result = convert(
            {
                "tools": [
                    {"type": "function", "function": {"name": first}},
                    {"type": "function", "function": {"name": second}},
                ]
            }
        )
        assert [tool["name"] for tool in result["tools"]] == ["mcp__search", "mcp__search_1"]

    def test_undeclared_call_name_does_not_collide_with_declared(self):
        declared = "mcp__" + "alpha" * 14 + "__search"
        undeclared = "mcp__" + "other" * 14 + "__search"
        result = convert(
            {
                "messages": [
                    {
                        "role": "assistant",
                        "tool_calls": [
                            {
                                "id": "c1",
                                "type": "function",
                                "function": {"name": undeclared, "arguments": "{}"},
                            }
                        ],
                    }
                ],
                "tools": [{"type": "function", "function": {"name": declared}}],
            }
        )

        assert result["tools"][0]["name"] == "mcp__search"
        assert result["input"][1]["name"] == "mcp__search_1"

    def test_each_undeclared_reference_is_logged(self, caplog):
        call = {"id": "c1", "type": "function", "function": {"name": "lookup", "arguments": "{}"}}
        payload = {
            "messages": [
                {"role": "assistant", "tool_calls": [call, {**call, "id": "c2"}]},
            ],
            "tools": [{"type": "function", "function": {"name": "search"}}],
        }

        with caplog.at_level(logging.DEBUG, logger="conversation"):
            convert(payload)

        undeclared = [r for r in caplog.records if "referenced but not declared" in r.getMessage()]
        assert len(undeclared) == 2

    def test_long_call_ids_shortened_and_correlated(self):
        call_id = "toolu_" + "z" * 90
        result = convert(
            {
                "messages": [
                    {
                        "role": "assistant",
                        "tool_calls": [
                            {"id": call_id, "type": "function", "function": {"name": "f"}}
                        ],
                    },
                    {"role": "tool", "tool_call_id": call_id, "content": "done"},
                ]
            }
        )
        call, output = result["input"][1], result["input"][2]

        assert call["call_id"] == output["call_id"]
        assert call["call_id"].startswith("call_")
        assert len(call["call_id"]) == 64
        assert call["arguments"] == ""


@pytest.mark.unit
class TestToolChoice:
    @pytest.mark.parametrize("choice", ["auto", "none", "required"])
    def test_string_passes_through(self, choice):
        assert convert({"tool_choice": choice})["tool_choice"] == choice

    def test_function_choice_flattened(self):
        result = convert({"tool_choice": {"type": "function", "function": {"name": "foo"}}})
        assert result["tool_choice"] == {"type": "function", "name": "foo"}

    def test_function_choice_without_name(self):
        result = convert({"tool_choice": {"type": "function", "function": {}}})
        assert result["tool_choice"] == {"type": "function"}

    def test_builtin_choice_passes_through(self):
        result = convert({"tool_choice": {"type": "web_search"}})
        assert result["tool_choice"] == {"type": "web_search"}

    @pytest.mark.parametrize("choice", [{"function": {"name": "x"}}, 7, None])
    def test_untyped_choice_omitted(self, choice):
        assert "tool_choice" not in convert({"tool_choice": choice})


@pytest.mark.unit
class TestStructuredOutput:
    def test_json_schema_response_format(self):
        schema = {"type": "object", "properties": {"n": {"type": "integer"}}}
        result = convert(
            {
                "messages": [],
                "response_format": {
                    "type": "json_schema",
                    "json_schema": {"name": "N", "strict": True, "schema": schema},
                },
            }
        )
        assert result["text"] == {
            "format": {"type": "json_schema", "name": "N", "strict": True, "schema": schema}
        }

    def test_text_verbosity_only(self):
        result = convert({"messages": [], "text": {"verbosity": "low"}})
        assert result["text"] == {"verbosity": "low"}


@pytest.mark.unit
class TestRobustness:
    def test_input_not_mutated(self, chat_request):
        snapshot = copy.deepcopy(chat_request)
        result = convert(chat_request)

        result["tools"][0]["parameters"]["properties"]["city"]["type"] = "number"
        assert chat_request == snapshot

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"messages": "not a list"},
            {"messages": [{"content": "no role"}]},
            {"tools": {"type": "function"}},
            {"tools": [{"function": {"name": "untyped"}}, "x"]},
            {"response_format": "json"},
        ],
    )
    def test_malformed_input_still_yields_scaffold(self, payload):
        result = convert(payload)
        assert result["instructions"] == ""
        assert result["store"] is False
        assert isinstance(result["input"], list)

    def test_missing_role_gives_empty_role(self):
        result = convert({"messages": [{"content": "no role"}]})
        assert result["input"] == [
            {"type": "message", "role": "", "content": [{"type": "input_text", "text": "no role"}]}
        ]


@pytest.mark.unit
class TestBytesEntryPoint:
    def test_round_trips_json(self, chat_request):
        raw = json.dumps(chat_request).encode("utf-8")
        output = convert_openai_request_to_codex("gpt-5-codex", raw, True)

        assert isinstance(output, bytes)
        assert json.loads(output) == build_codex_request("gpt-5-codex", chat_request, True)

    @pytest.mark.parametrize(
        "raw",
        [
            b"",
            b"not json",
            b"[1, 2, 3]",
            OUT_OF_RANGE_SCHEMA_BODY,
            b'{"messages":' + b"[" * 200_000 + b"]" * 200_000 + b"}",
        ],
    )
    def test_unparseable_body_yields_scaffold(self, raw):
        result = json.loads(convert_openai_request_to_codex("m", raw, False))
        assert result == {
            "instructions": "",
            "stream": False,
            "reasoning": {"effort": "medium", "summary": "auto"},
            "parallel_tool_calls": True,
            "include": ["reasoning.encrypted_content"],
            "model": "m",
            "store": False,
            "input": [],
        }

    def test_lone_surrogate_survives_as_escape(self):
        raw = b'{"messages":[{"role":"user","content":"hi \\ud83d"}]}'
        output = convert_openai_request_to_codex("m", raw, False)

        assert b"\\ud83d" in output
        content = json.loads(output)["input"][0]["content"]
        assert content == [{"type": "input_text", "text": "hi \ud83d"}]

    def test_out_of_range_number_rejected_in_strict_mode(self, monkeypatch):
        monkeypatch.setenv("CODEX_STRICT_CONVERSION", "true")
        reset_global_config()
        with pytest.raises(ConversionError) as exc_info:
            convert_openai_request_to_codex("m", OUT_OF_RANGE_SCHEMA_BODY, False)
        assert exc_info.value.error_type == ConversionErrorType.MALFORMED_REQUEST

    def test_invalid_log_level_does_not_block_conversion(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "verbose")
        monkeypatch.setenv("LOG_REQUEST_METRICS", "true")
        reset_global_config()

        result = json.loads(convert_openai_request_to_codex("m", b'{"messages":[]}', False))
        assert result["model"] == "m"
        assert result["input"] == []
