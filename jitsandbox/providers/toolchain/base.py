"""Compiler and executor interfaces."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from jitsandbox.models.sandbox import CompilationResult, ExecutionResult


class Compiler(Protocol):
    def compile(self, files: Sequence[Path], output_dir: Path) -> CompilationResult:
        ...


class Executor(Protocol):
    def execute(
        self,
        entry_name: str,
        classpath: Sequence[str],
        options: Sequence[str],
    ) -> ExecutionResult:
        ...
