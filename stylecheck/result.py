"""Core result data structures for the checker."""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Dict, Iterable, List, Sequence, Tuple

from .severity import Severity

SEVERITY_ORDER: Sequence[Severity] = tuple(sorted(Severity, key=lambda severity: severity.rank, reverse=True))


def exit_status(violations: Iterable[Violation]) -> int:
    """Return 1 when any violation is present, otherwise 0."""

    return 1 if any(True for _ in violations) else 0


@dataclass(frozen=True)
class Violation:
    """Capture a single broken rule at a file location."""

    rule_id: str
    path: str
    line: int
    message: str
    severity: Severity = Severity.WARNING

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError(f"Violation line must be >= 1, got {self.line}")

    @property
    def sort_key(self) -> Tuple[str, int, str]:
        return (self.path, self.line, self.rule_id)

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["severity"] = self.severity.value
        return data


@dataclass
class Summary:
    """Aggregate violation counts by severity."""

    error: int = 0
    warning: int = 0
    info: int = 0

    def increment(self, severity: Severity) -> None:
        attr = severity.value.lower()
        setattr(self, attr, getattr(self, attr) + 1)

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    def as_rows(self) -> List[Tuple[str, int]]:
        """Return severity/count pairs ordered for reporting."""

        return [(severity.value, getattr(self, severity.value.lower())) for severity in SEVERITY_ORDER]

    @property
    def total(self) -> int:
        return sum(getattr(self, severity.value.lower()) for severity in SEVERITY_ORDER)


@dataclass
class ScanResult:
    """Bundle the violations of one scan with its bookkeeping."""

    summary: Summary = field(default_factory=Summary)
    violations: List[Violation] = field(default_factory=list)
    files_scanned: int = 0
    interrupted: bool = False

    @property
    def passed(self) -> bool:
        return not self.violations

    def add_violation(self, violation: Violation) -> None:
        self.summary.increment(violation.severity)
        self.violations.append(violation)

    def extend(self, violations: Iterable[Violation]) -> None:
        for violation in violations:
            self.add_violation(violation)

    def sort(self) -> None:
        """Order violations file-then-line, ties broken by rule id."""

        self.violations.sort(key=lambda violation: violation.sort_key)

    def counts_by_rule(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for violation in self.violations:
            counts[violation.rule_id] = counts.get(violation.rule_id, 0) + 1
        return dict(sorted(counts.items()))

    def to_dict(self) -> Dict[str, object]:
        return {
            "summary": self.summary.to_dict(),
            "violations": [violation.to_dict() for violation in self.violations],
            "files_scanned": self.files_scanned,
            "interrupted": self.interrupted,
            "passed": self.passed,
        }

    def exit_code(self) -> int:
        return exit_status(self.violations)
