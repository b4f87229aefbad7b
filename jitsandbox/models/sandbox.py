"""Data models for sandbox runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional


@dataclass(frozen=True)
class SourceUnit:
    source: str
    package: str
    name: str
    has_entry_point: bool
    path: Path

    @property
    def fq_name(self) -> str:
        if self.package:
            return f"{self.package}.{self.name}"
        return self.name


@dataclass
class SandboxSession:
    units: list[SourceUnit] = field(default_factory=list)
    first_unit_name: Optional[str] = None
    entry_unit_name: Optional[str] = None

    @property
    def files(self) -> list[Path]:
        return [unit.path for unit in self.units]


@dataclass(frozen=True)
class CompilationResult:
    success: bool
    messages: str = ""
    timed_out: bool = False


@dataclass(frozen=True)
class ExecutionResult:
    success: bool
    error_output: str = ""
    exit_code: Optional[int] = None
    duration_ms: int = 0
    timed_out: bool = False


class RunState(str, Enum):
    WRITING = "writing"
    COMPILING = "compiling"
    EXECUTING = "executing"
    NO_ENTRY_POINT = "no_entry_point"
    INGESTING = "ingesting"
    LOCATING = "locating"
    DONE = "done"
    ABORTED = "aborted"

    @property
    def is_terminal(self) -> bool:
        return self in (RunState.DONE, RunState.NO_ENTRY_POINT, RunState.ABORTED)


@dataclass(frozen=True)
class StageResult:
    next_state: RunState
    error: Optional[str] = None

    @classmethod
    def proceed(cls, next_state: RunState) -> "StageResult":
        return cls(next_state=next_state)

    @classmethod
    def abort(cls, error: str) -> "StageResult":
        return cls(next_state=RunState.ABORTED, error=error)


@dataclass(frozen=True)
class RunResult:
    state: RunState
    history: tuple[RunState, ...]
    member: Any = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.state is not RunState.ABORTED
