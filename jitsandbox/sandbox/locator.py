"""Select the compiled member to show once a run has been ingested."""

from __future__ import annotations

from typing import Optional

from jitsandbox.providers.analysis.base import AnalysisModel, Member
from jitsandbox.providers.sink.base import SandboxSink


class ResultLocator:
    def __init__(self, model: AnalysisModel, sink: SandboxSink) -> None:
        self._model = model
        self._sink = sink

    def locate(self, fq_name: Optional[str]) -> Optional[Member]:
        first_compiled = None
        self._sink.log(f"Looking up class: {fq_name}")
        representation = self._model.lookup(fq_name) if fq_name else None
        if representation is not None:
            self._sink.log(f"Found: {representation.fq_name}")
            self._sink.log("looking for compiled members")
            first_compiled = next(
                (member for member in representation.members() if member.is_compiled()),
                None,
            )
        self._sink.navigate_to(first_compiled)
        return first_compiled
