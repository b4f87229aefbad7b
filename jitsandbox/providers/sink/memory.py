"""Sink that records everything it is sent."""

from __future__ import annotations

import logging
from typing import Any

from jitsandbox.providers.sink.base import SandboxSink

logger = logging.getLogger(__name__)


class RecordingSink(SandboxSink):
    def __init__(self) -> None:
        self.lines: list[str] = []
        self.errors: list[str] = []
        self.navigations: list[Any | None] = []

    def log(self, line: str) -> None:
        logger.debug("%s", line)
        self.lines.append(line)

    def show_error(self, text: str) -> None:
        logger.warning("Sandbox error: %s", text)
        self.errors.append(text)

    def navigate_to(self, member: Any | None) -> None:
        self.navigations.append(member)
