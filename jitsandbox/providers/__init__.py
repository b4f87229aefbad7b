"""Provider package for toolchain, analysis model and sink integrations."""

from jitsandbox.providers.analysis import AnalysisModel
from jitsandbox.providers.sink import RecordingSink, SandboxSink
from jitsandbox.providers.toolchain import Compiler, Executor, JavaExecutor, JavacCompiler

__all__ = [
    "AnalysisModel",
    "Compiler",
    "Executor",
    "JavaExecutor",
    "JavacCompiler",
    "RecordingSink",
    "SandboxSink",
]
