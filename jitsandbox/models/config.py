"""Sandbox configuration and its YAML persistence."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from enum import Enum
import importlib
import importlib.util
import logging
import os
from pathlib import Path
from typing import Any

from jitsandbox.errors import FilesystemError

logger = logging.getLogger(__name__)

DEFAULT_FREQ_INLINE_SIZE = 325
DEFAULT_MAX_INLINE_SIZE = 35
DEFAULT_COMPILER_THRESHOLD = 10000

DEFAULT_CONFIG_PATH = "config/sandbox.yaml"


class Mode(str, Enum):
    """Three-way setting for runtime modes such as tiered compilation."""

    AUTO = "auto"
    FORCE_ON = "force_on"
    FORCE_OFF = "force_off"


@dataclass
class SandboxConfig:
    source_locations: list[str] = field(default_factory=list)
    class_locations: list[str] = field(default_factory=list)
    print_assembly: bool = False
    intel_mode: bool = False
    tiered_compilation: Mode = Mode.AUTO
    compressed_oops: Mode = Mode.AUTO
    freq_inline_size: int = DEFAULT_FREQ_INLINE_SIZE
    max_inline_size: int = DEFAULT_MAX_INLINE_SIZE
    compiler_threshold: int = DEFAULT_COMPILER_THRESHOLD
    compile_timeout_s: int = 60
    execute_timeout_s: int = 120

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SandboxConfig":
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        for key in ("tiered_compilation", "compressed_oops"):
            if key in values:
                values[key] = Mode(values[key])
        for key in ("source_locations", "class_locations"):
            if key in values:
                values[key] = [str(item) for item in values[key] or []]
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["tiered_compilation"] = self.tiered_compilation.value
        data["compressed_oops"] = self.compressed_oops.value
        return data


class ConfigStore:
    """Loads and saves a ``SandboxConfig`` as a YAML document."""

    def __init__(self, config_path: str | None = None) -> None:
        self._config_path = Path(
            config_path or os.getenv("JITSANDBOX_CONFIG", DEFAULT_CONFIG_PATH)
        )

    @property
    def path(self) -> Path:
        return self._config_path

    def load(self) -> SandboxConfig:
        if not self._config_path.exists():
            return SandboxConfig()
        yaml = self._yaml()
        try:
            with self._config_path.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        except OSError as exc:
            raise FilesystemError(f"Cannot read config {self._config_path}: {exc}") from exc
        if not isinstance(data, dict):
            return SandboxConfig()
        return SandboxConfig.from_dict(data)

    def save(self, config: SandboxConfig) -> None:
        yaml = self._yaml()
        try:
            self._config_path.parent.mkdir(parents=True, exist_ok=True)
            with self._config_path.open("w", encoding="utf-8") as handle:
                yaml.safe_dump(config.to_dict(), handle, sort_keys=False)
        except OSError as exc:
            raise FilesystemError(f"Cannot write config {self._config_path}: {exc}") from exc
        logger.info("Saved sandbox config to %s", self._config_path)

    def _yaml(self) -> Any:
        if importlib.util.find_spec("yaml") is None:
            raise RuntimeError("PyYAML is required to load the sandbox config.")
        return importlib.import_module("yaml")
