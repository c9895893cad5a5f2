"""Walk input paths, split files into units and run the enabled rules."""

from __future__ import annotations

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from .errors import FileUnreadable, ScanError
from .result import ScanResult, Violation
from .rules import FILE_UNREADABLE, SCAN_ERROR, Rule, RuleRegistry, ScanUnit, UnitKind
from .severity import Severity
from .utils import iter_source_files, read_source_file

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".swift",)
MAX_DECLARATION_LINES = 12

FUNC_DECLARATION = re.compile(r"^\s*(?:(?:@\w+(?:\([^)]*\))?|\w+)\s+)*func\s+\S")
SIGNATURE_CONTINUATIONS = ("->", "throws", "rethrows", "async", "where")


def _declaration_units(path: str, lines: Sequence[str]) -> Iterator[ScanUnit]:
    """Yield ``func`` headers, from the keyword line up to the opening brace."""

    for index, line in enumerate(lines):
        if FUNC_DECLARATION.match(line) is None:
            continue
        header: List[str] = []
        depth = 0
        window = lines[index:index + MAX_DECLARATION_LINES]
        for position, current in enumerate(window):
            brace = current.find("{")
            part = current if brace == -1 else current[:brace]
            header.append(part)
            depth += part.count("(") - part.count(")")
            if brace != -1:
                break
            if depth > 0 or part.rstrip().endswith(("->", ",", "(")):
                continue
            following = window[position + 1].lstrip() if position + 1 < len(window) else ""
            if not following.startswith(SIGNATURE_CONTINUATIONS):
                break
        yield ScanUnit(
            kind=UnitKind.DECLARATION,
            path=path,
            line=index + 1,
            text="\n".join(header).rstrip(),
        )


def split_units(path: str, text: str) -> List[ScanUnit]:
    """Split file text into line, declaration and whole-file units."""

    lines = text.splitlines()
    units = [ScanUnit(kind=UnitKind.FILE, path=path, line=1, text=text)]
    units.extend(_declaration_units(path, lines))
    units.extend(
        ScanUnit(kind=UnitKind.LINE, path=path, line=number, text=line)
        for number, line in enumerate(lines, start=1)
    )
    return units


class Scanner:
    """Run a registry's enabled rules over a set of paths."""

    def __init__(
        self,
        registry: RuleRegistry,
        enabled: Optional[Iterable[str]] = None,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        jobs: int = 1,
    ) -> None:
        self.registry = registry
        if enabled is None:
            self.enabled = frozenset(registry.ids())
        else:
            self.enabled = frozenset(registry.get(rule_id).id for rule_id in enabled)
        self.extensions = tuple(extensions)
        self.jobs = max(1, jobs)
        self._rules_by_kind: Dict[UnitKind, List[Rule]] = {kind: [] for kind in UnitKind}
        for rule in registry.all():
            if rule.id in self.enabled:
                self._rules_by_kind[rule.applies_to].append(rule)

    # ------------------------------------------------------------------
    # Path expansion
    # ------------------------------------------------------------------
    def collect_files(self, paths: Iterable[str]) -> List[Path]:
        """Expand directories and return a sorted, de-duplicated file list.

        Explicit file paths are kept whatever their extension; missing paths
        are kept so that scanning reports them.
        """

        files = set()
        for raw in paths:
            path = Path(raw)
            if path.is_dir():
                files.update(iter_source_files([path], extensions=self.extensions))
            else:
                files.add(path)
        return sorted(files, key=str)

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------
    def scan(self, paths: Iterable[str]) -> ScanResult:
        files = self.collect_files(paths)
        result = ScanResult()
        try:
            for violations in self._scan_files(files):
                result.extend(violations)
                result.files_scanned += 1
        except KeyboardInterrupt:
            logger.warning("Scan interrupted after %d of %d files", result.files_scanned, len(files))
            result.interrupted = True
        result.sort()
        return result

    def _scan_files(self, files: Sequence[Path]) -> Iterator[List[Violation]]:
        if self.jobs == 1 or len(files) < 2:
            for path in files:
                yield self.scan_file(path)
            return
        with ThreadPoolExecutor(max_workers=self.jobs) as pool:
            futures = [pool.submit(self.scan_file, path) for path in files]
            try:
                for future in futures:
                    yield future.result()
            finally:
                for future in futures:
                    future.cancel()

    def scan_file(self, path: Path) -> List[Violation]:
        """Return the sorted violations for one file."""

        display = str(path)
        try:
            text = read_source_file(path)
        except FileUnreadable as exc:
            logger.warning("Cannot read %s: %s", display, exc.reason)
            return self._reserved(FILE_UNREADABLE, display, f"Cannot read file: {exc.reason}", Severity.ERROR)
        except ScanError as exc:
            logger.warning("Skipping %s: %s", display, exc.reason)
            return self._reserved(SCAN_ERROR, display, f"Skipped malformed file: {exc.reason}", Severity.WARNING)

        logger.debug("Scanning %s", display)
        violations: List[Violation] = []
        for unit in split_units(display, text):
            violations.extend(self.check_unit(unit))
        violations.sort(key=lambda violation: violation.sort_key)
        return violations

    def check_unit(self, unit: ScanUnit) -> List[Violation]:
        violations: List[Violation] = []
        for rule in self._rules_by_kind[unit.kind]:
            violations.extend(rule.check(unit))
        return violations

    def _reserved(self, rule_id: str, path: str, message: str, severity: Severity) -> List[Violation]:
        if rule_id not in self.enabled:
            return []
        return [Violation(rule_id=rule_id, path=path, line=1, message=message, severity=severity)]
