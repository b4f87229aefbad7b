"""Toolchain implementations and interfaces."""

from jitsandbox.providers.toolchain.base import Compiler, Executor
from jitsandbox.providers.toolchain.local import JavaExecutor, JavacCompiler

__all__ = ["Compiler", "Executor", "JavaExecutor", "JavacCompiler"]
