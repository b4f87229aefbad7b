from __future__ import annotations

from pathlib import Path

import pytest

from jitsandbox.sandbox.workspace import EXAMPLES_DIR, Workspace


def _snapshot(directory: Path) -> list[str]:
    return sorted(str(path.relative_to(directory)) for path in directory.rglob("*"))


def test_layout_under_root(tmp_path: Path) -> None:
    workspace = Workspace(tmp_path)

    assert workspace.source_dir == tmp_path.resolve() / "sandbox" / "sources"
    assert workspace.class_dir == tmp_path.resolve() / "sandbox" / "classes"
    assert workspace.log_file == tmp_path.resolve() / "sandbox" / "sandbox.log"
    assert not workspace.sandbox_dir.exists()


def test_ensure_ready_seeds_examples_only_on_first_creation(tmp_path: Path) -> None:
    examples = tmp_path / "examples"
    examples.mkdir()
    (examples / "Example.java").write_text("public class Example {}", encoding="utf-8")
    workspace = Workspace(tmp_path / "root", examples_dir=examples)

    workspace.ensure_ready()
    (workspace.source_dir / "Example.java").unlink()
    workspace.ensure_ready()

    assert workspace.class_dir.is_dir()
    assert list(workspace.source_dir.iterdir()) == []


def test_reset_empties_and_reseeds(tmp_path: Path) -> None:
    examples = tmp_path / "examples"
    examples.mkdir()
    (examples / "Example.java").write_text("public class Example {}", encoding="utf-8")
    workspace = Workspace(tmp_path / "root", examples_dir=examples)
    workspace.ensure_ready()
    (workspace.class_dir / "Stale.class").write_bytes(b"\xca\xfe")
    workspace.log_file.write_text("old log", encoding="utf-8")

    workspace.reset()
    first = _snapshot(workspace.sandbox_dir)
    workspace.reset()

    assert first == ["classes", "sources", str(Path("sources") / "Example.java")]
    assert _snapshot(workspace.sandbox_dir) == first


def test_reset_without_examples_leaves_empty_dirs(workspace: Workspace) -> None:
    workspace.ensure_ready()
    (workspace.source_dir / "Old.java").write_text("class Old {}", encoding="utf-8")

    workspace.reset()

    assert workspace.source_dir.is_dir()
    assert workspace.class_dir.is_dir()
    assert list(workspace.source_dir.iterdir()) == []
    assert list(workspace.class_dir.iterdir()) == []


def test_bundled_examples_are_shipped() -> None:
    assert any(path.suffix == ".java" for path in EXAMPLES_DIR.iterdir())


def test_from_environment_uses_root_variable(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JITSANDBOX_ROOT", str(tmp_path))

    assert Workspace.from_environment().sandbox_dir == tmp_path.resolve() / "sandbox"
