"""Sink interface for progress lines and results."""

from __future__ import annotations

from typing import Any, Protocol


class SandboxSink(Protocol):
    def log(self, line: str) -> None:
        ...

    def show_error(self, text: str) -> None:
        ...

    def navigate_to(self, member: Any | None) -> None:
        ...
