"""Persist raw source text as source files in the workspace."""

from __future__ import annotations

from pathlib import Path
import re

from jitsandbox.errors import FilesystemError, ParseError
from jitsandbox.models.sandbox import SandboxSession, SourceUnit
from jitsandbox.providers.sink.base import SandboxSink

SOURCE_SUFFIX = ".java"

_PACKAGE_RE = re.compile(r"^\s*package\s+([\w.]+)\s*;", re.MULTILINE)
_TYPE_RE = re.compile(
    r"(?<![\w$.])((?:(?:public|protected|private|abstract|final|static|sealed|non-sealed|strictfp)\s+)*)"
    r"@?(?<![\w$.])(?:class|interface|enum|record)\s+([A-Za-z_$][\w$]*)"
)


def _blank_comments_and_literals(source: str) -> str:
    """Replace comments, string and char literals with spaces, keeping offsets."""
    out = list(source)
    length = len(source)
    i = 0
    while i < length:
        if source.startswith("//", i):
            end = source.find("\n", i)
            end = length if end == -1 else end
        elif source.startswith("/*", i):
            end = source.find("*/", i + 2)
            end = length if end == -1 else end + 2
        elif source.startswith('"""', i):
            end = source.find('"""', i + 3)
            end = length if end == -1 else end + 3
        elif source[i] in "\"'":
            quote = source[i]
            end = i + 1
            while end < length and source[end] not in (quote, "\n"):
                end += 2 if source[end] == "\\" else 1
            end = min(end + 1, length)
        else:
            i += 1
            continue
        for j in range(i, end):
            if out[j] != "\n":
                out[j] = " "
        i = end
    return "".join(out)


def parse_package(source: str) -> str:
    match = _PACKAGE_RE.search(_blank_comments_and_literals(source))
    return match.group(1) if match else ""


def parse_type_name(source: str) -> str:
    """Return the public top-level type name, else the first top-level type name.

    Declarations inside braces are nested types and never count.
    """
    text = _blank_comments_and_literals(source)
    first = None
    depth = 0
    position = 0
    for match in _TYPE_RE.finditer(text):
        skipped = text[position:match.start()]
        depth += skipped.count("{") - skipped.count("}")
        position = match.start()
        if depth != 0:
            continue
        if "public" in match.group(1).split():
            return match.group(2)
        if first is None:
            first = match.group(2)
    if first is None:
        raise ParseError("No top-level class, interface, enum or record declaration found in source")
    return first


class EntryPointDetector:
    """Textual check for a ``main`` method.

    A literal substring match: a string literal or comment containing the
    signature counts, and a ``main`` declared with other modifiers or spacing
    does not.
    """

    SIGNATURES = ("public static void main(", "public static void main (")

    def contains_entry_point(self, source: str) -> bool:
        return any(signature in source for signature in self.SIGNATURES)


class SourceUnitWriter:
    def __init__(
        self,
        source_dir: Path,
        sink: SandboxSink,
        detector: EntryPointDetector | None = None,
    ) -> None:
        self._source_dir = source_dir
        self._sink = sink
        self._detector = detector or EntryPointDetector()

    def write(self, source: str, session: SandboxSession) -> SourceUnit:
        package = parse_package(source)
        name = parse_type_name(source)
        has_entry_point = self._detector.contains_entry_point(source)
        relative = Path(*package.split(".")) if package else Path()
        target = self._source_dir / relative / f"{name}{SOURCE_SUFFIX}"
        unit = SourceUnit(
            source=source,
            package=package,
            name=name,
            has_entry_point=has_entry_point,
            path=target,
        )

        if has_entry_point:
            session.entry_unit_name = unit.fq_name
            self._sink.log(f"Found main method in {unit.fq_name}")
        if session.first_unit_name is None:
            session.first_unit_name = unit.fq_name

        self._sink.log(f"Writing source file: {unit.fq_name}{SOURCE_SUFFIX}")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(source, encoding="utf-8")
        except OSError as exc:
            raise FilesystemError(f"Cannot write source file {target}: {exc}") from exc

        session.units.append(unit)
        return unit
