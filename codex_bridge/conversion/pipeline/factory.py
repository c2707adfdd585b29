"""Request pipeline factory.

Builds the two default conversion pipelines.
"""

from codex_bridge.conversion.pipeline.base import RequestPipeline, RequestTransformer
from codex_bridge.conversion.pipeline.transformers import (
    CallIdTransformer,
    CodexFlagsTransformer,
    DeveloperRoleTransformer,
    MessageInputTransformer,
    ResponsesScaffoldTransformer,
    StringInputTransformer,
    StructuredOutputTransformer,
    ToolChoiceTransformer,
    ToolNameRegistrationTransformer,
    ToolSchemaTransformer,
    UnsupportedFieldsTransformer,
)
from codex_bridge.core.constants import Constants


class RequestPipelineFactory:
    """Factory for creating request conversion pipelines."""

    @staticmethod
    def create_chat_completions() -> RequestPipeline:
        """Create the Chat-Completions to Responses pipeline.

        Transformers are executed in the following order:
        1. UnsupportedFieldsTransformer - Report sampling/token-limit fields
        2. ResponsesScaffoldTransformer - Fixed request fields
        3. ToolNameRegistrationTransformer - Alias declared tool names
        4. MessageInputTransformer - Convert messages to input items
        5. StructuredOutputTransformer - Map response_format/text
        6. ToolSchemaTransformer - Flatten tools
        7. ToolChoiceTransformer - Map tool_choice

        The tool name step must run before any step that references a tool
        name, so declared tools claim their aliases first.
        """
        transformers: list[RequestTransformer] = [
            UnsupportedFieldsTransformer(Constants.CHAT_UNFORWARDED_FIELDS, strip=False),
            ResponsesScaffoldTransformer(),
            ToolNameRegistrationTransformer(),
            MessageInputTransformer(),
            StructuredOutputTransformer(),
            ToolSchemaTransformer(),
            ToolChoiceTransformer(),
        ]
        return RequestPipeline(transformers)

    @staticmethod
    def create_responses_normalizer() -> RequestPipeline:
        """Create the Responses normalization pipeline.

        Transformers are executed in the following order:
        1. StringInputTransformer - Wrap a bare string input
        2. CodexFlagsTransformer - Force stream/store/parallel/include
        3. UnsupportedFieldsTransformer - Strip rejected fields
        4. DeveloperRoleTransformer - system -> developer
        5. CallIdTransformer - Shorten call ids
        """
        transformers: list[RequestTransformer] = [
            StringInputTransformer(),
            CodexFlagsTransformer(),
            UnsupportedFieldsTransformer(Constants.RESPONSES_UNSUPPORTED_FIELDS, strip=True),
            DeveloperRoleTransformer(),
            CallIdTransformer(),
        ]
        return RequestPipeline(transformers)

    @staticmethod
    def create_custom(transformers: list[RequestTransformer]) -> RequestPipeline:
        """Create a custom pipeline with specified transformers."""
        return RequestPipeline(transformers)
