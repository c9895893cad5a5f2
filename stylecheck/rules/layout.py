"""File organisation and whitespace checks."""

from __future__ import annotations

import re
from typing import List

from stylecheck.result import Violation

from . import Rule, ScanUnit, UnitKind

MARK_SEPARATOR = "mark-separator"
TRAILING_WHITESPACE = "trailing-whitespace"

MARK_COMMENT = re.compile(r"^\s*//\s*MARK:\s?(?P<rest>.*)$")
TOP_LEVEL_DECLARATION = re.compile(
    r"^(?:@\w+\s+)*"
    r"(?:(?:public|private|fileprivate|internal|open|final|indirect)\s+)*"
    r"(?P<keyword>class|struct|enum|extension|protocol|actor)\s+\w"
)
TRAILING_WHITESPACE_PATTERN = re.compile(r"[ \t]+$")


def _is_separator(rest: str) -> bool:
    return rest == "-" or rest.startswith("- ")


def check_mark_separator(unit: ScanUnit) -> List[Violation]:
    """Flag malformed MARK comments and unseparated top-level declarations.

    Every top-level type or extension after the first must be preceded by a
    ``// MARK: -`` comment somewhere after the previous declaration.
    """

    violations: List[Violation] = []
    seen_declaration = False
    separated = False
    for offset, line in enumerate(unit.text.splitlines()):
        mark = MARK_COMMENT.match(line)
        if mark is not None:
            if _is_separator(mark.group("rest")):
                separated = True
            else:
                violations.append(
                    unit.violation(
                        MARK_SEPARATOR,
                        "Write MARK comments as '// MARK: - Section' so Xcode draws a separator.",
                        offset=offset,
                    )
                )
            continue
        declaration = TOP_LEVEL_DECLARATION.match(line)
        if declaration is None:
            continue
        if seen_declaration and not separated:
            violations.append(
                unit.violation(
                    MARK_SEPARATOR,
                    f"Precede this {declaration.group('keyword')} with a '// MARK: -' separator.",
                    offset=offset,
                )
            )
        seen_declaration = True
        separated = False
    return violations


def check_trailing_whitespace(unit: ScanUnit) -> List[Violation]:
    if TRAILING_WHITESPACE_PATTERN.search(unit.text) is None:
        return []
    return [unit.violation(TRAILING_WHITESPACE, "Remove trailing whitespace.")]


def get_rules() -> List[Rule]:
    return [
        Rule(
            id=MARK_SEPARATOR,
            description="Organise types and extensions with '// MARK: -' separators.",
            check=check_mark_separator,
            applies_to=UnitKind.FILE,
        ),
        Rule(
            id=TRAILING_WHITESPACE,
            description="Lines must not end with spaces or tabs.",
            check=check_trailing_whitespace,
        ),
    ]
