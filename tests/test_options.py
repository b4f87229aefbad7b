from __future__ import annotations

from pathlib import Path

from jitsandbox.models.config import Mode, SandboxConfig
from jitsandbox.sandbox.options import DiagnosticOptionBuilder

BASE_FLAGS = [
    "-XX:+UnlockDiagnosticVMOptions",
    "-XX:+TraceClassLoading",
    "-XX:+LogCompilation",
]


def test_default_config_emits_only_base_flags(tmp_path: Path) -> None:
    log_file = tmp_path / "sandbox.log"

    options = DiagnosticOptionBuilder().build(SandboxConfig(), log_file)

    assert options == BASE_FLAGS + [f"-XX:LogFile={log_file.resolve()}"]


def test_all_rules_emit_in_fixed_order(tmp_path: Path) -> None:
    config = SandboxConfig(
        print_assembly=True,
        intel_mode=True,
        tiered_compilation=Mode.FORCE_OFF,
        compressed_oops=Mode.FORCE_ON,
        freq_inline_size=100,
        max_inline_size=20,
        compiler_threshold=500,
    )

    options = DiagnosticOptionBuilder().build(config, tmp_path / "sandbox.log")

    assert options[4:] == [
        "-XX:+PrintAssembly",
        "-XX:PrintAssemblyOptions=intel",
        "-XX:-TieredCompilation",
        "-XX:+UseCompressedOops",
        "-XX:FreqInlineSize=100",
        "-XX:MaxInlineSize=20",
        "-XX:CompilerThreshold=500",
    ]
    assert len(options) == len(set(options))


def test_intel_syntax_requires_print_assembly(tmp_path: Path) -> None:
    config = SandboxConfig(intel_mode=True)

    options = DiagnosticOptionBuilder().build(config, tmp_path / "sandbox.log")

    assert not any("PrintAssembly" in option for option in options)


def test_forced_modes_map_to_plus_and_minus(tmp_path: Path) -> None:
    builder = DiagnosticOptionBuilder()
    on = builder.build(
        SandboxConfig(tiered_compilation=Mode.FORCE_ON, compressed_oops=Mode.FORCE_OFF),
        tmp_path / "sandbox.log",
    )

    assert "-XX:+TieredCompilation" in on
    assert "-XX:-UseCompressedOops" in on


def test_thresholds_equal_to_defaults_are_omitted(tmp_path: Path) -> None:
    config = SandboxConfig(freq_inline_size=325, max_inline_size=36, compiler_threshold=10000)

    options = DiagnosticOptionBuilder().build(config, tmp_path / "sandbox.log")

    assert options[-1] == "-XX:MaxInlineSize=36"
    assert not any("FreqInlineSize" in option or "CompilerThreshold" in option for option in options)


def test_build_is_deterministic(tmp_path: Path) -> None:
    config = SandboxConfig(print_assembly=True, compiler_threshold=1)
    builder = DiagnosticOptionBuilder()

    assert builder.build(config, tmp_path / "a.log") == builder.build(config, tmp_path / "a.log")
