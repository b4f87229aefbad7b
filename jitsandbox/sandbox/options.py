"""Build the JVM flags that make a run emit JIT diagnostics."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, NamedTuple, Sequence

from jitsandbox.models.config import (
    DEFAULT_COMPILER_THRESHOLD,
    DEFAULT_FREQ_INLINE_SIZE,
    DEFAULT_MAX_INLINE_SIZE,
    Mode,
    SandboxConfig,
)


class OptionRule(NamedTuple):
    applies: Callable[[SandboxConfig], bool]
    flags: Callable[[SandboxConfig], Sequence[str]]


def _mode_rule(attribute: str, flag_name: str) -> OptionRule:
    def applies(config: SandboxConfig) -> bool:
        return getattr(config, attribute) is not Mode.AUTO

    def flags(config: SandboxConfig) -> Sequence[str]:
        sign = "+" if getattr(config, attribute) is Mode.FORCE_ON else "-"
        return [f"-XX:{sign}{flag_name}"]

    return OptionRule(applies, flags)


def _threshold_rule(attribute: str, default: int, flag_name: str) -> OptionRule:
    return OptionRule(
        lambda config: getattr(config, attribute) != default,
        lambda config: [f"-XX:{flag_name}={getattr(config, attribute)}"],
    )


# Evaluated top to bottom; the order here is the order of the emitted flags.
OPTION_RULES: tuple[OptionRule, ...] = (
    OptionRule(
        lambda config: config.print_assembly,
        lambda config: ["-XX:+PrintAssembly"]
        + (["-XX:PrintAssemblyOptions=intel"] if config.intel_mode else []),
    ),
    _mode_rule("tiered_compilation", "TieredCompilation"),
    _mode_rule("compressed_oops", "UseCompressedOops"),
    _threshold_rule("freq_inline_size", DEFAULT_FREQ_INLINE_SIZE, "FreqInlineSize"),
    _threshold_rule("max_inline_size", DEFAULT_MAX_INLINE_SIZE, "MaxInlineSize"),
    _threshold_rule("compiler_threshold", DEFAULT_COMPILER_THRESHOLD, "CompilerThreshold"),
)


class DiagnosticOptionBuilder:
    def __init__(self, rules: Sequence[OptionRule] = OPTION_RULES) -> None:
        self._rules = tuple(rules)

    def build(self, config: SandboxConfig, log_file: Path) -> list[str]:
        options = [
            "-XX:+UnlockDiagnosticVMOptions",
            "-XX:+TraceClassLoading",
            "-XX:+LogCompilation",
            f"-XX:LogFile={Path(log_file).resolve()}",
        ]
        for rule in self._rules:
            if rule.applies(config):
                options.extend(rule.flags(config))
        return options
