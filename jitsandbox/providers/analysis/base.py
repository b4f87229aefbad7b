"""Analysis model interface consumed by the sandbox.

The model is built by a diagnostic-log parser that lives outside this package.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol, Sequence


class Member(Protocol):
    def is_compiled(self) -> bool:
        ...


class ClassRepresentation(Protocol):
    @property
    def fq_name(self) -> str:
        ...

    def members(self) -> Sequence[Member]:
        ...


class AnalysisModel(Protocol):
    def reset(self) -> None:
        ...

    def ingest(self, log_file: Path) -> None:
        ...

    def lookup(self, fq_name: str) -> Optional[ClassRepresentation]:
        ...
