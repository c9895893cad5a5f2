"""Rule registry for the style checker."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, List, Tuple

from stylecheck.errors import DuplicateRuleId, UnknownRuleId
from stylecheck.result import Violation
from stylecheck.severity import Severity

FILE_UNREADABLE = "file-unreadable"
SCAN_ERROR = "scan-error"
RESERVED_RULE_IDS = (FILE_UNREADABLE, SCAN_ERROR)


class UnitKind(str, Enum):
    """Kinds of source spans handed to rules."""

    LINE = "line"
    DECLARATION = "declaration"
    FILE = "file"


@dataclass(frozen=True)
class ScanUnit:
    """A contiguous span of source text and where it came from."""

    kind: UnitKind
    path: str
    line: int
    text: str

    def violation(
        self,
        rule_id: str,
        message: str,
        offset: int = 0,
        severity: Severity = Severity.WARNING,
    ) -> Violation:
        """Build a violation ``offset`` lines below the start of this unit."""

        return Violation(
            rule_id=rule_id,
            path=self.path,
            line=self.line + offset,
            message=message,
            severity=severity,
        )


CheckFn = Callable[[ScanUnit], List[Violation]]


def _never(unit: ScanUnit) -> List[Violation]:
    return []


@dataclass(frozen=True)
class Rule:
    """A named style check bound to the unit kind it inspects."""

    id: str
    description: str
    check: CheckFn
    applies_to: UnitKind = UnitKind.LINE

    def applies(self, unit: ScanUnit) -> bool:
        return unit.kind is self.applies_to


class RuleRegistry:
    """Ordered, append-only collection of rules keyed by id."""

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: Dict[str, Rule] = {}
        for rule in rules:
            self.register(rule)

    def register(self, rule: Rule) -> None:
        if rule.id in self._rules:
            raise DuplicateRuleId(rule.id)
        self._rules[rule.id] = rule

    def all(self) -> Tuple[Rule, ...]:
        return tuple(self._rules.values())

    def ids(self) -> Tuple[str, ...]:
        return tuple(self._rules)

    def get(self, rule_id: str) -> Rule:
        try:
            return self._rules[rule_id]
        except KeyError:
            raise UnknownRuleId(rule_id) from None

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._rules

    def __len__(self) -> int:
        return len(self._rules)


def reserved_rules() -> List[Rule]:
    """Rules the scanner reports on its own; they never fire on units."""

    return [
        Rule(
            id=FILE_UNREADABLE,
            description="Path does not exist or cannot be opened.",
            check=_never,
            applies_to=UnitKind.FILE,
        ),
        Rule(
            id=SCAN_ERROR,
            description="File content is not scannable text (binary or invalid UTF-8).",
            check=_never,
            applies_to=UnitKind.FILE,
        ),
    ]


def default_registry() -> RuleRegistry:
    """Return a registry holding the reserved rules and every built-in style rule."""

    from . import closures, declarations, expressions, layout

    registry = RuleRegistry(reserved_rules())
    for module in (declarations, closures, expressions, layout):
        for rule in module.get_rules():
            registry.register(rule)
    return registry
