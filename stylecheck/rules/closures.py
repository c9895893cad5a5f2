"""Closure capture and parameter list checks."""

from __future__ import annotations

import re
from typing import List

from stylecheck.result import Violation
from stylecheck.utils import code_part

from . import Rule, ScanUnit

UNOWNED_SELF = "unowned-self"
EMPTY_PARENS_CLOSURE = "empty-parens-closure"

UNOWNED_SELF_PATTERN = re.compile(r"\[[^\]]*\bunowned(?:\((?:un)?safe\))?\s+self\b[^\]]*\]")
EMPTY_PARENS_PATTERN = re.compile(r"\{\s*\(\s*\)\s*in\b")


def check_unowned_self(unit: ScanUnit) -> List[Violation]:
    if UNOWNED_SELF_PATTERN.search(code_part(unit.text)) is None:
        return []
    return [
        unit.violation(
            UNOWNED_SELF,
            "Capture self weakly with '[weak self]' and unwrap it instead of '[unowned self]'.",
        )
    ]


def check_empty_parens(unit: ScanUnit) -> List[Violation]:
    if EMPTY_PARENS_PATTERN.search(code_part(unit.text)) is None:
        return []
    return [unit.violation(EMPTY_PARENS_CLOSURE, "Drop the empty '() in' from the closure.")]


def get_rules() -> List[Rule]:
    return [
        Rule(
            id=UNOWNED_SELF,
            description="Prefer '[weak self]' over '[unowned self]' in capture lists.",
            check=check_unowned_self,
        ),
        Rule(
            id=EMPTY_PARENS_CLOSURE,
            description="Closures without parameters should omit '() in'.",
            check=check_empty_parens,
        ),
    ]
