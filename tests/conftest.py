"""Shared fixtures and test doubles for the sandbox pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

import pytest

from jitsandbox.models.config import ConfigStore
from jitsandbox.models.sandbox import CompilationResult, ExecutionResult
from jitsandbox.providers.sink.memory import RecordingSink
from jitsandbox.sandbox.workspace import Workspace


@dataclass
class FakeMember:
    name: str
    compiled: bool = False

    def is_compiled(self) -> bool:
        return self.compiled

    def __str__(self) -> str:
        return self.name


@dataclass
class FakeClass:
    fq_name: str
    declared: list[FakeMember] = field(default_factory=list)

    def members(self) -> Sequence[FakeMember]:
        return self.declared


class FakeModel:
    def __init__(self, classes: Sequence[FakeClass] = ()) -> None:
        self.classes = {cls.fq_name: cls for cls in classes}
        self.resets = 0
        self.ingested: list[Path] = []

    def reset(self) -> None:
        self.resets += 1

    def ingest(self, log_file: Path) -> None:
        self.ingested.append(log_file)

    def lookup(self, fq_name: str) -> Optional[FakeClass]:
        return self.classes.get(fq_name)


class FakeCompiler:
    def __init__(self, success: bool = True, messages: str = "") -> None:
        self.success = success
        self.messages = messages
        self.calls: list[tuple[list[Path], Path]] = []

    def compile(self, files: Sequence[Path], output_dir: Path) -> CompilationResult:
        self.calls.append((list(files), output_dir))
        return CompilationResult(success=self.success, messages=self.messages)


class FakeExecutor:
    """Pretends to run the program and writes the diagnostic log it would produce."""

    def __init__(
        self,
        log_file: Path | None = None,
        success: bool = True,
        error_output: str = "",
    ) -> None:
        self.log_file = log_file
        self.success = success
        self.error_output = error_output
        self.calls: list[tuple[str, list[str], list[str]]] = []

    def execute(
        self,
        entry_name: str,
        classpath: Sequence[str],
        options: Sequence[str],
    ) -> ExecutionResult:
        self.calls.append((entry_name, list(classpath), list(options)))
        if self.success and self.log_file is not None:
            self.log_file.write_text("<hotspot_log/>\n", encoding="utf-8")
        return ExecutionResult(
            success=self.success,
            error_output=self.error_output,
            exit_code=0 if self.success else 1,
        )


@pytest.fixture(autouse=True)
def _no_java_home(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("JAVA_HOME", raising=False)


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    return Workspace(tmp_path / "root", examples_dir=None)


@pytest.fixture
def config_store(tmp_path: Path) -> ConfigStore:
    return ConfigStore(str(tmp_path / "config" / "sandbox.yaml"))


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
