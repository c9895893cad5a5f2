"""Statement-level checks applied to single lines."""

from __future__ import annotations

import re
from typing import List

from stylecheck.result import Violation
from stylecheck.utils import code_part

from . import Rule, ScanUnit, UnitKind

TRAILING_SEMICOLON = "trailing-semicolon"
FORCE_CAST = "force-cast"

SEMICOLON_PATTERN = re.compile(r";\s*$")
FORCE_CAST_PATTERN = re.compile(r"\bas!")


def check_trailing_semicolon(unit: ScanUnit) -> List[Violation]:
    if SEMICOLON_PATTERN.search(code_part(unit.text)) is None:
        return []
    return [unit.violation(TRAILING_SEMICOLON, "Do not terminate statements with a semicolon.")]


def check_force_cast(unit: ScanUnit) -> List[Violation]:
    if FORCE_CAST_PATTERN.search(code_part(unit.text)) is None:
        return []
    return [unit.violation(FORCE_CAST, "Avoid forced casts; use 'as?' with optional binding.")]


def get_rules() -> List[Rule]:
    return [
        Rule(
            id=TRAILING_SEMICOLON,
            description="Swift statements do not need a trailing semicolon.",
            check=check_trailing_semicolon,
            applies_to=UnitKind.LINE,
        ),
        Rule(
            id=FORCE_CAST,
            description="Forced casts ('as!') crash at runtime on mismatch.",
            check=check_force_cast,
            applies_to=UnitKind.LINE,
        ),
    ]
