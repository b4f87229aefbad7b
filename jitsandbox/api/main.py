"""HTTP surface for running sandbox sessions."""

from __future__ import annotations

import threading
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from jitsandbox.errors import FilesystemError, ParseError
from jitsandbox.models.config import ConfigStore
from jitsandbox.providers.analysis.base import AnalysisModel
from jitsandbox.providers.sink.memory import RecordingSink
from jitsandbox.providers.toolchain.base import Compiler, Executor
from jitsandbox.sandbox.pipeline import PipelineOrchestrator
from jitsandbox.sandbox.workspace import Workspace


class RunRequest(BaseModel):
    sources: list[str]


class RunResponse(BaseModel):
    state: str
    history: list[str]
    log: list[str]
    errors: list[str]
    member: Optional[str] = None


def create_app(
    model: AnalysisModel,
    config_store: ConfigStore | None = None,
    workspace: Workspace | None = None,
    compiler: Compiler | None = None,
    executor: Executor | None = None,
) -> FastAPI:
    app = FastAPI(title="jit-sandbox")
    store = config_store or ConfigStore()
    sandbox_workspace = workspace or Workspace.from_environment()
    run_lock = threading.Lock()

    @app.get("/health")
    def health_check() -> dict:
        return {"status": "ok"}

    @app.post("/sandbox/run", response_model=RunResponse)
    def run_sandbox(request: RunRequest) -> RunResponse:
        if not request.sources:
            raise HTTPException(status_code=422, detail="At least one source is required.")
        if not run_lock.acquire(blocking=False):
            raise HTTPException(status_code=409, detail="A sandbox run is already in progress.")
        try:
            sink = RecordingSink()
            orchestrator = PipelineOrchestrator(
                sandbox_workspace,
                store,
                model,
                sink,
                compiler=compiler,
                executor=executor,
            )
            result = orchestrator.run(request.sources)
        except ParseError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except FilesystemError as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        finally:
            run_lock.release()
        return RunResponse(
            state=result.state.value,
            history=[state.value for state in result.history],
            log=sink.lines,
            errors=sink.errors,
            member=None if result.member is None else str(result.member),
        )

    @app.post("/sandbox/reset")
    def reset_sandbox() -> dict:
        if not run_lock.acquire(blocking=False):
            raise HTTPException(status_code=409, detail="A sandbox run is already in progress.")
        try:
            sandbox_workspace.reset()
        except FilesystemError as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        finally:
            run_lock.release()
        return {"status": "reset"}

    return app
