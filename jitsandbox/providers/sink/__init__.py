"""Sink implementations and interfaces."""

from jitsandbox.providers.sink.base import SandboxSink
from jitsandbox.providers.sink.memory import RecordingSink

__all__ = ["RecordingSink", "SandboxSink"]
