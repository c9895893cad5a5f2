"""Source code helper utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Generator, Iterable


def iter_source_files(
    root_paths: Iterable[Path],
    extensions: tuple[str, ...] = (".swift",),
) -> Generator[Path, None, None]:
    """Yield source files beneath the provided directories, sorted per root."""

    for root in root_paths:
        for path in sorted(Path(root).rglob("*")):
            if path.suffix in extensions and path.is_file():
                yield path


def code_part(line: str) -> str:
    """Return ``line`` without a trailing ``//`` comment outside string literals."""

    in_string = False
    escaped = False
    for index, char in enumerate(line):
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif line.startswith("//", index):
            return line[:index]
    return line
