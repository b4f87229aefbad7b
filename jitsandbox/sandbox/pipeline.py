"""Write, compile, execute, ingest and locate in one sandbox run."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import os
from typing import Any, Callable, Optional, Sequence

from jitsandbox.models.config import ConfigStore, SandboxConfig
from jitsandbox.models.sandbox import RunResult, RunState, SandboxSession, StageResult
from jitsandbox.providers.analysis.base import AnalysisModel
from jitsandbox.providers.sink.base import SandboxSink
from jitsandbox.providers.toolchain.base import Compiler, Executor
from jitsandbox.providers.toolchain.local import JavaExecutor, JavacCompiler
from jitsandbox.sandbox.locator import ResultLocator
from jitsandbox.sandbox.options import DiagnosticOptionBuilder
from jitsandbox.sandbox.sync import ConfigSynchronizer
from jitsandbox.sandbox.workspace import Workspace
from jitsandbox.sandbox.writer import EntryPointDetector, SourceUnitWriter

logger = logging.getLogger(__name__)


@dataclass
class _Run:
    sources: Sequence[str]
    config: SandboxConfig
    compiler: Compiler
    executor: Executor
    session: SandboxSession = field(default_factory=SandboxSession)
    member: Any = None


class PipelineOrchestrator:
    """Runs one sandbox session as a state machine.

    Each non-terminal state maps to a handler that returns the next state.
    Compile and execute failures are reported to the sink and end the run in
    ``ABORTED``; filesystem and parse errors propagate to the caller.
    """

    def __init__(
        self,
        workspace: Workspace,
        config_store: ConfigStore,
        model: AnalysisModel,
        sink: SandboxSink,
        compiler: Compiler | None = None,
        executor: Executor | None = None,
        option_builder: DiagnosticOptionBuilder | None = None,
        detector: EntryPointDetector | None = None,
        synchronizer: ConfigSynchronizer | None = None,
    ) -> None:
        self._workspace = workspace
        self._config_store = config_store
        self._sink = sink
        self._compiler = compiler
        self._executor = executor
        self._option_builder = option_builder or DiagnosticOptionBuilder()
        self._writer = SourceUnitWriter(workspace.source_dir, sink, detector)
        self._synchronizer = synchronizer or ConfigSynchronizer(config_store, model, sink)
        self._locator = ResultLocator(model, sink)
        self._handlers: dict[RunState, Callable[[_Run], StageResult]] = {
            RunState.WRITING: self._write,
            RunState.COMPILING: self._compile,
            RunState.EXECUTING: self._execute,
            RunState.INGESTING: self._ingest,
            RunState.LOCATING: self._locate,
        }

    def run(self, sources: Sequence[str]) -> RunResult:
        self._workspace.ensure_ready()
        config = self._config_store.load()
        run = _Run(
            sources=list(sources),
            config=config,
            compiler=self._compiler or JavacCompiler(timeout_s=config.compile_timeout_s),
            executor=self._executor or JavaExecutor(timeout_s=config.execute_timeout_s),
        )
        state = RunState.WRITING
        history = [state]
        error: Optional[str] = None
        while not state.is_terminal:
            result = self._handlers[state](run)
            state = result.next_state
            error = result.error
            history.append(state)
        logger.info("Sandbox run finished in state %s", state.value)
        return RunResult(state=state, history=tuple(history), member=run.member, error=error)

    def _write(self, run: _Run) -> StageResult:
        for source in run.sources:
            self._writer.write(source, run.session)
        return StageResult.proceed(RunState.COMPILING)

    def _compile(self, run: _Run) -> StageResult:
        files = run.session.files
        self._sink.log("Compiling: " + ", ".join(str(path) for path in files))
        result = run.compiler.compile(files, self._workspace.class_dir)
        self._sink.log(f"Compilation success: {result.success}")
        if not result.success:
            self._sink.show_error(result.messages)
            return StageResult.abort(result.messages)
        if run.session.entry_unit_name is None:
            self._sink.log("No main method found")
            return StageResult.proceed(RunState.NO_ENTRY_POINT)
        return StageResult.proceed(RunState.EXECUTING)

    def _execute(self, run: _Run) -> StageResult:
        entry = run.session.entry_unit_name
        classpath = [str(self._workspace.class_dir), *run.config.class_locations]
        options = self._option_builder.build(run.config, self._workspace.log_file)
        self._sink.log(f"Executing: {entry}")
        self._sink.log("Classpath: " + os.pathsep.join(classpath))
        self._sink.log("VM options: " + " ".join(options))
        result = run.executor.execute(entry, classpath, options)
        self._sink.log(f"Execution success: {result.success}")
        if not result.success:
            self._sink.show_error(result.error_output)
            return StageResult.abort(result.error_output)
        return StageResult.proceed(RunState.INGESTING)

    def _ingest(self, run: _Run) -> StageResult:
        self._sink.log(f"Reading diagnostic log: {self._workspace.log_file}")
        self._synchronizer.synchronize(run.config, self._workspace)
        return StageResult.proceed(RunState.LOCATING)

    def _locate(self, run: _Run) -> StageResult:
        run.member = self._locator.locate(run.session.first_unit_name)
        return StageResult.proceed(RunState.DONE)
