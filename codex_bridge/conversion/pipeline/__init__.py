"""Request conversion pipeline.

A composable pipeline for building Codex requests. Each transformer in the
pipeline handles a single responsibility.
"""

from codex_bridge.conversion.pipeline.base import (
    ConversionContext,
    RequestPipeline,
    RequestTransformer,
)
from codex_bridge.conversion.pipeline.factory import RequestPipelineFactory

__all__ = ["ConversionContext", "RequestPipeline", "RequestTransformer", "RequestPipelineFactory"]
