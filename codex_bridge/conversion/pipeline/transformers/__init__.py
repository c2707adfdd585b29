"""Request conversion transformers.

Each transformer handles a single, focused transformation of the request.
Transformers are executed in sequence by the RequestPipeline.
"""

from codex_bridge.conversion.pipeline.transformers.call_ids import CallIdTransformer
from codex_bridge.conversion.pipeline.transformers.codex_flags import CodexFlagsTransformer
from codex_bridge.conversion.pipeline.transformers.developer_role import DeveloperRoleTransformer
from codex_bridge.conversion.pipeline.transformers.input_wrapping import StringInputTransformer
from codex_bridge.conversion.pipeline.transformers.message_input import MessageInputTransformer
from codex_bridge.conversion.pipeline.transformers.scaffold import ResponsesScaffoldTransformer
from codex_bridge.conversion.pipeline.transformers.structured_output import (
    StructuredOutputTransformer,
)
from codex_bridge.conversion.pipeline.transformers.tool_choice import ToolChoiceTransformer
from codex_bridge.conversion.pipeline.transformers.tool_names import (
    ToolNameRegistrationTransformer,
)
from codex_bridge.conversion.pipeline.transformers.tool_schema import ToolSchemaTransformer
from codex_bridge.conversion.pipeline.transformers.unsupported_fields import (
    UnsupportedFieldsTransformer,
)

__all__ = [
    "CallIdTransformer",
    "CodexFlagsTransformer",
    "DeveloperRoleTransformer",
    "MessageInputTransformer",
    "ResponsesScaffoldTransformer",
    "StringInputTransformer",
    "StructuredOutputTransformer",
    "ToolChoiceTransformer",
    "ToolNameRegistrationTransformer",
    "ToolSchemaTransformer",
    "UnsupportedFieldsTransformer",
]
