"""Sandboxed compile, run and JIT-diagnose pipeline."""

from jitsandbox.errors import FilesystemError, ParseError
from jitsandbox.sandbox.pipeline import PipelineOrchestrator
from jitsandbox.sandbox.workspace import Workspace

__all__ = ["FilesystemError", "ParseError", "PipelineOrchestrator", "Workspace"]
