"""Sandbox workspace directories."""

from __future__ import annotations

import logging
import os
from pathlib import Path
import shutil

from jitsandbox.errors import FilesystemError

logger = logging.getLogger(__name__)

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "resources" / "examples"

LOG_FILE_NAME = "sandbox.log"


class Workspace:
    """Owns the source tree, the class output tree and the session log file.

    Construct one at startup and hand it to every component that needs paths.
    Nothing touches the disk until ``ensure_ready`` is called.
    """

    def __init__(self, root: str | Path, examples_dir: Path | None = EXAMPLES_DIR) -> None:
        self.root = Path(root).resolve()
        self.sandbox_dir = self.root / "sandbox"
        self.source_dir = self.sandbox_dir / "sources"
        self.class_dir = self.sandbox_dir / "classes"
        self.log_file = self.sandbox_dir / LOG_FILE_NAME
        self._examples_dir = examples_dir

    @classmethod
    def from_environment(cls) -> "Workspace":
        return cls(os.getenv("JITSANDBOX_ROOT") or os.getcwd())

    def ensure_ready(self) -> None:
        try:
            if not self.source_dir.exists():
                self.source_dir.mkdir(parents=True)
                self._copy_examples()
            self.class_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(f"Cannot prepare sandbox workspace {self.sandbox_dir}: {exc}") from exc

    def reset(self) -> None:
        logger.info("Resetting sandbox workspace %s", self.sandbox_dir)
        try:
            if self.sandbox_dir.exists():
                for entry in self.sandbox_dir.iterdir():
                    if entry.is_dir() and not entry.is_symlink():
                        shutil.rmtree(entry)
                    else:
                        entry.unlink()
        except OSError as exc:
            raise FilesystemError(f"Cannot reset sandbox workspace {self.sandbox_dir}: {exc}") from exc
        self.ensure_ready()

    def _copy_examples(self) -> None:
        if self._examples_dir is None or not self._examples_dir.is_dir():
            return
        for example in sorted(self._examples_dir.iterdir()):
            if example.is_file():
                shutil.copy2(example, self.source_dir / example.name)
        logger.info("Seeded %s with examples from %s", self.source_dir, self._examples_dir)
