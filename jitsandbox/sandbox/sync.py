"""Register workspace paths in the config and re-ingest the diagnostic log."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Optional

from jitsandbox.errors import FilesystemError
from jitsandbox.models.config import ConfigStore, SandboxConfig
from jitsandbox.providers.analysis.base import AnalysisModel
from jitsandbox.providers.sink.base import SandboxSink
from jitsandbox.sandbox.workspace import Workspace

logger = logging.getLogger(__name__)


def find_jdk_source_zip(java_home: str | None = None) -> Optional[Path]:
    home = java_home or os.getenv("JAVA_HOME")
    if not home:
        return None
    base = Path(home)
    for candidate in (base / "lib" / "src.zip", base / "src.zip", base.parent / "src.zip"):
        if candidate.is_file():
            return candidate
    return None


def _append_missing(locations: list[str], value: str) -> bool:
    if value in locations:
        return False
    locations.append(value)
    return True


class ConfigSynchronizer:
    def __init__(
        self,
        store: ConfigStore,
        model: AnalysisModel,
        sink: SandboxSink,
        source_zip_finder: Callable[[], Optional[Path]] = find_jdk_source_zip,
    ) -> None:
        self._store = store
        self._model = model
        self._sink = sink
        self._source_zip_finder = source_zip_finder

    def register_paths(self, config: SandboxConfig, workspace: Workspace) -> bool:
        """Add workspace locations to ``config``, saving it only if it changed."""
        changed = _append_missing(config.source_locations, str(workspace.source_dir))
        changed = _append_missing(config.class_locations, str(workspace.class_dir)) or changed
        source_zip = self._source_zip_finder()
        if source_zip is not None:
            changed = _append_missing(config.source_locations, str(source_zip)) or changed
        if changed:
            self._store.save(config)
        return changed

    def synchronize(self, config: SandboxConfig, workspace: Workspace) -> None:
        self.register_paths(config, workspace)
        if not workspace.log_file.is_file():
            raise FilesystemError(f"Diagnostic log not found: {workspace.log_file}")
        self._model.reset()
        try:
            self._model.ingest(workspace.log_file)
        except OSError as exc:
            raise FilesystemError(f"Cannot read diagnostic log {workspace.log_file}: {exc}") from exc
        logger.info("Ingested %s", workspace.log_file)
        self._sink.log("Parsing complete")
