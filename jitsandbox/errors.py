"""Errors raised by the sandbox pipeline."""

from __future__ import annotations


class FilesystemError(RuntimeError):
    """Raised when the workspace, a source file or the diagnostic log cannot be accessed."""


class ParseError(ValueError):
    """Raised when a type name cannot be extracted from source text."""
