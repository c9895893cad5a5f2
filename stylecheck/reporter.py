"""Render scan results for the console and for other tools."""

from __future__ import annotations

import json
from typing import Iterable, List

from .result import ScanResult, Violation


def format_violation(violation: Violation) -> str:
    return f"{violation.path}:{violation.line}: [{violation.rule_id}] {violation.message}"


def render(violations: Iterable[Violation]) -> List[str]:
    """Return one line per violation sorted by path, line and rule id."""

    ordered = sorted(violations, key=lambda violation: violation.sort_key)
    return [format_violation(violation) for violation in ordered]


def render_json(result: ScanResult) -> str:
    payload = result.to_dict()
    payload["violations"] = [
        violation.to_dict() for violation in sorted(result.violations, key=lambda violation: violation.sort_key)
    ]
    return json.dumps(payload, indent=2)


def format_summary_table(result: ScanResult) -> str:
    """Create a human-readable summary table for console output."""

    lines: List[str] = []
    lines.append("Scan Summary")
    lines.append("=" * 40)
    header = f"{'Severity':<10} | {'Count':>5}"
    lines.append(header)
    lines.append("-" * len(header))
    for severity, count in result.summary.as_rows():
        lines.append(f"{severity:<10} | {count:>5}")
    lines.append("-" * len(header))
    status = "PASS" if result.passed else "FAIL"
    lines.append(f"Status    : {status}")
    lines.append(f"Files     : {result.files_scanned}")
    lines.append(f"Violations: {result.summary.total}")
    if result.interrupted:
        lines.append("Note      : scan interrupted, results are partial")

    counts = result.counts_by_rule()
    if counts:
        lines.append("")
        lines.append("By Rule")
        lines.append("-" * 40)
        for rule_id, count in counts.items():
            lines.append(f"{rule_id:<28} {count:>5}")
    return "\n".join(lines)
