"""Base infrastructure for request conversion pipeline.

This module defines the core components of the pipeline:
- ConversionContext: Immutable context passed through transformers
- RequestTransformer: Abstract base for all transformation steps
- RequestPipeline: Orchestrator that executes transformers in sequence
"""

import dataclasses
import logging
from abc import ABC, abstractmethod
from typing import Any

from codex_bridge.conversion.document import JsonDocument
from codex_bridge.conversion.identifiers import IdentifierRegistry
from codex_bridge.core.error_types import ConversionError, ConversionErrorType
from codex_bridge.core.logging import ConversationLogger

conversation_logger = ConversationLogger.get_logger()


@dataclasses.dataclass(frozen=True)
class ConversionContext:
    """Immutable context passed through the conversion pipeline.

    The frozen=True ensures transformers return new instances rather than
    mutating the context. The identifier registry is the one mutable member:
    it is created for a single conversion and never outlives it.

    Attributes:
        source: The incoming request document (read only).
        model: Model name to write into the outgoing request.
        stream: Stream flag requested by the caller.
        strict: Raise ConversionError instead of skipping malformed input.
        registry: Tool name and call id aliases for this conversion.
        target: The request being built (replaced by each transformer).
        metadata: Optional metadata for debugging and extensibility.
    """

    source: JsonDocument
    model: str
    stream: bool
    strict: bool
    registry: IdentifierRegistry
    target: dict[str, Any]
    metadata: dict[str, Any] = dataclasses.field(default_factory=dict)

    def with_target(self, target: dict[str, Any]) -> "ConversionContext":
        return dataclasses.replace(self, target=target)

    def reject(self, error_type: ConversionErrorType, message: str, path: str = "") -> None:
        """Report input the conversion cannot use.

        Raises in strict mode; otherwise logs at DEBUG and lets the caller
        skip the value.

        Raises:
            ConversionError: When the context is strict.
        """
        if self.strict:
            raise ConversionError(error_type, message, path)
        location = f" at '{path}'" if path else ""
        conversation_logger.debug(f"Skipping input ({error_type.value}){location}: {message}")


class RequestTransformer(ABC):
    """Base class for all request transformation steps.

    Each transformer handles a single, focused transformation of the request.
    Transformers must not mutate the input context or its target dict; they
    return a new ConversionContext built with dataclasses.replace().
    """

    @abstractmethod
    def transform(self, context: ConversionContext) -> ConversionContext:
        """Transform the context and return a new instance."""

    @property
    def name(self) -> str:
        """Human-readable name for logging and debugging."""
        return self.__class__.__name__


class RequestPipeline:
    """Orchestrates the execution of transformers in sequence.

    Each transformer receives the output of the previous transformer as its
    input.
    """

    def __init__(self, transformers: list[RequestTransformer]) -> None:
        self.transformers = transformers
        self.logger = logging.getLogger(f"{__name__}.RequestPipeline")

    def run(self, initial_context: ConversionContext) -> ConversionContext:
        """Execute all transformers and return the final context.

        The built request is the returned context's ``target``.

        Raises:
            ConversionError: If a transformer rejects input in strict mode.
            Exception: Any other transformer failure propagates unchanged.
        """
        context = initial_context

        for i, transformer in enumerate(self.transformers):
            self.logger.debug(
                f"Running transformer [{i + 1}/{len(self.transformers)}]: {transformer.name}"
            )
            try:
                context = transformer.transform(context)
            except ConversionError as e:
                self.logger.info(f"Transformer {transformer.name} rejected input: {e}")
                raise
            except Exception as e:
                self.logger.error(
                    f"Transformer {transformer.name} failed: {e}",
                    exc_info=True,
                )
                raise

        self.logger.debug(f"Pipeline completed: {len(self.transformers)} transformers executed")
        return context
