"""Checks that inspect ``func`` declaration headers."""

from __future__ import annotations

import re
from typing import List, Optional

from stylecheck.result import Violation

from . import Rule, ScanUnit, UnitKind

AVOID_VOID_RETURN = "avoid-void-return"

FUNC_KEYWORD = re.compile(r"\bfunc\b")
VOID_RETURN_PATTERN = re.compile(
    r"\s*(?:async\s+)?(?:throws(?:\([^)]*\))?|rethrows)?\s*->\s*(?:Void\b|\(\s*\))\s*(?:where\b.*)?$",
    re.DOTALL,
)


def _parameter_list_end(text: str, start: int) -> Optional[int]:
    """Return the index of the paren closing the first parameter list after ``start``."""

    open_index = text.find("(", start)
    if open_index == -1:
        return None
    depth = 0
    for index in range(open_index, len(text)):
        char = text[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return index
    return None


def check_void_return(unit: ScanUnit) -> List[Violation]:
    keyword = FUNC_KEYWORD.search(unit.text)
    if keyword is None:
        return []
    close = _parameter_list_end(unit.text, keyword.end())
    if close is None:
        return []
    tail = unit.text[close + 1:]
    match = VOID_RETURN_PATTERN.match(tail)
    if match is None:
        return []
    arrow = unit.text.index("->", close)
    offset = unit.text.count("\n", 0, arrow)
    return [
        unit.violation(
            AVOID_VOID_RETURN,
            "Omit the '-> Void' return type from function declarations.",
            offset=offset,
        )
    ]


def get_rules() -> List[Rule]:
    return [
        Rule(
            id=AVOID_VOID_RETURN,
            description="Functions returning nothing should not spell out '-> Void' or '-> ()'.",
            check=check_void_return,
            applies_to=UnitKind.DECLARATION,
        ),
    ]
