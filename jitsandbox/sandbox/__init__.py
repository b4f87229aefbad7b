"""Sandbox pipeline stages."""

from jitsandbox.sandbox.locator import ResultLocator
from jitsandbox.sandbox.options import DiagnosticOptionBuilder
from jitsandbox.sandbox.pipeline import PipelineOrchestrator
from jitsandbox.sandbox.sync import ConfigSynchronizer
from jitsandbox.sandbox.workspace import Workspace
from jitsandbox.sandbox.writer import EntryPointDetector, SourceUnitWriter

__all__ = [
    "ConfigSynchronizer",
    "DiagnosticOptionBuilder",
    "EntryPointDetector",
    "PipelineOrchestrator",
    "ResultLocator",
    "SourceUnitWriter",
    "Workspace",
]
