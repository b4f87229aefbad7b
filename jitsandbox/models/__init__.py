"""Shared data models for jit-sandbox."""

from jitsandbox.models.config import ConfigStore, Mode, SandboxConfig
from jitsandbox.models.sandbox import (
    CompilationResult,
    ExecutionResult,
    RunResult,
    RunState,
    SandboxSession,
    SourceUnit,
    StageResult,
)

__all__ = [
    "CompilationResult",
    "ConfigStore",
    "ExecutionResult",
    "Mode",
    "RunResult",
    "RunState",
    "SandboxConfig",
    "SandboxSession",
    "SourceUnit",
    "StageResult",
]
