"""Local JDK toolchain running javac and java as subprocesses."""

from __future__ import annotations

import logging
import os
from pathlib import Path
import subprocess
import time
from typing import Sequence

from jitsandbox.models.sandbox import CompilationResult, ExecutionResult
from jitsandbox.providers.toolchain.base import Compiler, Executor

logger = logging.getLogger(__name__)


def _jdk_binary(name: str, java_home: str | None = None) -> str:
    home = java_home or os.getenv("JAVA_HOME")
    if home:
        return str(Path(home) / "bin" / name)
    return name


def _run(command: Sequence[str], timeout_s: int | None) -> tuple[subprocess.CompletedProcess[str], int]:
    start = time.monotonic()
    process = subprocess.run(
        list(command),
        capture_output=True,
        text=True,
        timeout=timeout_s,
        check=False,
    )
    duration_ms = int((time.monotonic() - start) * 1000)
    return process, duration_ms


class JavacCompiler(Compiler):
    def __init__(self, java_home: str | None = None, timeout_s: int | None = 60) -> None:
        self._javac = _jdk_binary("javac", java_home)
        self._timeout_s = timeout_s

    def compile(self, files: Sequence[Path], output_dir: Path) -> CompilationResult:
        command = [self._javac, "-g", "-d", str(output_dir), *[str(path) for path in files]]
        logger.info("Running %s", " ".join(command))
        try:
            process, duration_ms = _run(command, self._timeout_s)
        except subprocess.TimeoutExpired:
            logger.warning("javac timed out after %ss", self._timeout_s)
            return CompilationResult(
                success=False,
                messages=f"Compilation timed out after {self._timeout_s}s",
                timed_out=True,
            )
        except FileNotFoundError:
            return CompilationResult(success=False, messages=f"Compiler not found: {self._javac}")
        logger.info("javac exited with %s in %sms", process.returncode, duration_ms)
        messages = "\n".join(part for part in (process.stdout, process.stderr) if part.strip())
        return CompilationResult(success=process.returncode == 0, messages=messages)


class JavaExecutor(Executor):
    def __init__(self, java_home: str | None = None, timeout_s: int | None = 120) -> None:
        self._java = _jdk_binary("java", java_home)
        self._timeout_s = timeout_s

    def execute(
        self,
        entry_name: str,
        classpath: Sequence[str],
        options: Sequence[str],
    ) -> ExecutionResult:
        command = [self._java, *options, "-cp", os.pathsep.join(classpath), entry_name]
        logger.info("Running %s", " ".join(command))
        try:
            process, duration_ms = _run(command, self._timeout_s)
        except subprocess.TimeoutExpired:
            logger.warning("java timed out after %ss", self._timeout_s)
            return ExecutionResult(
                success=False,
                error_output=f"Execution timed out after {self._timeout_s}s",
                timed_out=True,
            )
        except FileNotFoundError:
            return ExecutionResult(success=False, error_output=f"Runtime not found: {self._java}")
        logger.info("java exited with %s in %sms", process.returncode, duration_ms)
        return ExecutionResult(
            success=process.returncode == 0,
            error_output=process.stderr,
            exit_code=process.returncode,
            duration_ms=duration_ms,
        )
