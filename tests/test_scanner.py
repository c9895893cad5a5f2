import random
from pathlib import Path

import pytest

from stylecheck import scanner as scanner_module
from stylecheck.errors import UnknownRuleId
from stylecheck.reporter import render
from stylecheck.rules import ScanUnit, UnitKind, default_registry
from stylecheck.scanner import Scanner, split_units
from stylecheck.severity import Severity

SAMPLES = Path(__file__).resolve().parent.parent / "samples"


def test_void_return_example_on_explicit_txt_file(tmp_path):
    source = tmp_path / "a.txt"
    source.write_text("func someMethod() -> Void {\n", encoding="utf-8")

    result = Scanner(default_registry(), enabled=["avoid-void-return"]).scan([str(source)])

    assert len(result.violations) == 1
    violation = result.violations[0]
    assert violation.rule_id == "avoid-void-return"
    assert violation.line == 1
    assert render(result.violations)[0].startswith(f"{source}:1: [avoid-void-return] ")


def test_clean_file_has_no_violations():
    result = Scanner(default_registry()).scan([str(SAMPLES / "clean")])

    assert result.files_scanned == 1
    assert result.violations == []
    assert result.exit_code() == 0


def test_sample_with_violations():
    result = Scanner(default_registry()).scan([str(SAMPLES / "violations")])

    found = [(violation.line, violation.rule_id) for violation in result.violations]
    assert found == [
        (4, "trailing-semicolon"),
        (6, "avoid-void-return"),
        (7, "unowned-self"),
        (14, "avoid-void-return"),
        (15, "force-cast"),
        (15, "trailing-whitespace"),
        (16, "empty-parens-closure"),
        (22, "mark-separator"),
        (23, "mark-separator"),
    ]
    assert result.exit_code() == 1


def test_missing_path_reported_and_scan_continues(tmp_path):
    good = tmp_path / "Good.swift"
    good.write_text("let a = 1;\n", encoding="utf-8")
    missing = tmp_path / "Missing.swift"

    result = Scanner(default_registry()).scan([str(missing), str(good)])

    unreadable = [violation for violation in result.violations if violation.rule_id == "file-unreadable"]
    assert len(unreadable) == 1
    assert unreadable[0].path == str(missing)
    assert unreadable[0].severity is Severity.ERROR
    assert any(violation.rule_id == "trailing-semicolon" for violation in result.violations)
    assert result.files_scanned == 2


def test_binary_file_degrades_to_scan_error(tmp_path):
    binary = tmp_path / "Blob.swift"
    binary.write_bytes(b"\x00\x01\x02binary")
    latin = tmp_path / "Latin.swift"
    latin.write_bytes("let name = \"caf\xe9\"\n".encode("latin-1"))
    good = tmp_path / "Good.swift"
    good.write_text("let a = 1 \n", encoding="utf-8")

    result = Scanner(default_registry()).scan([str(tmp_path)])

    by_rule = {(violation.path, violation.rule_id) for violation in result.violations}
    assert (str(binary), "scan-error") in by_rule
    assert (str(latin), "scan-error") in by_rule
    assert (str(good), "trailing-whitespace") in by_rule
    errors = [violation for violation in result.violations if violation.rule_id == "scan-error"]
    assert all(violation.severity is Severity.WARNING for violation in errors)


def test_disabling_all_rules_yields_nothing(tmp_path):
    binary = tmp_path / "Blob.swift"
    binary.write_bytes(b"\x00")

    result = Scanner(default_registry(), enabled=[]).scan(
        [str(SAMPLES / "violations"), str(binary), str(tmp_path / "missing.swift")]
    )

    assert result.violations == []
    assert result.exit_code() == 0


def test_unknown_enabled_rule_fails_fast():
    with pytest.raises(UnknownRuleId):
        Scanner(default_registry(), enabled=["no-such-rule"])


def test_directory_walk_filters_extensions_and_sorts(tmp_path):
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "B.swift").write_text("let b = 1;\n", encoding="utf-8")
    (tmp_path / "A.swift").write_text("let a = 1;\n", encoding="utf-8")
    (tmp_path / "notes.md").write_text("let c = 1;\n", encoding="utf-8")

    scanner = Scanner(default_registry())
    files = scanner.collect_files([str(tmp_path), str(tmp_path / "A.swift")])

    assert files == [tmp_path / "A.swift", tmp_path / "b" / "B.swift"]


def test_scan_is_deterministic_and_parallel_matches_sequential(tmp_path):
    for index in range(6):
        (tmp_path / f"File{index}.swift").write_text(
            "func run() -> Void {\n  let x = y as! Int;\n}\n", encoding="utf-8"
        )

    first = Scanner(default_registry()).scan([str(tmp_path)])
    second = Scanner(default_registry()).scan([str(tmp_path)])
    parallel = Scanner(default_registry(), jobs=4).scan([str(tmp_path)])

    assert render(first.violations) == render(second.violations)
    assert render(first.violations) == render(parallel.violations)
    assert first.files_scanned == parallel.files_scanned == 6


def test_interrupt_returns_partial_results(tmp_path, monkeypatch):
    for name in ("A.swift", "B.swift", "C.swift"):
        (tmp_path / name).write_text("let a = 1;\n", encoding="utf-8")

    scanner = Scanner(default_registry())
    original = scanner.scan_file
    calls = []

    def interrupting(path):
        calls.append(path)
        if len(calls) == 2:
            raise KeyboardInterrupt
        return original(path)

    monkeypatch.setattr(scanner, "scan_file", interrupting)
    result = scanner.scan([str(tmp_path)])

    assert result.interrupted is True
    assert result.files_scanned == 1
    assert [violation.path for violation in result.violations] == [str(tmp_path / "A.swift")]


def test_split_units_kinds_and_lines():
    text = "import UIKit\n\nfunc load(\n  id: Int\n) -> Void {\n}\n"

    units = split_units("a.swift", text)

    kinds = [unit.kind for unit in units]
    assert kinds.count(UnitKind.FILE) == 1
    assert kinds.count(UnitKind.LINE) == 6
    declarations = [unit for unit in units if unit.kind is UnitKind.DECLARATION]
    assert declarations == [
        ScanUnit(kind=UnitKind.DECLARATION, path="a.swift", line=3, text="func load(\n  id: Int\n) -> Void")
    ]


def test_declaration_without_body_stops_at_signature():
    text = "protocol Loader {\n  func load() -> Void\n  var name: String { get }\n}\n"

    declarations = [unit for unit in split_units("a.swift", text) if unit.kind is UnitKind.DECLARATION]

    assert [unit.text for unit in declarations] == ["  func load() -> Void"]


def test_violation_order_independent_of_rule_order(monkeypatch):
    registry = default_registry()
    rules = list(registry.all())
    random.Random(7).shuffle(rules)
    monkeypatch.setattr(registry, "all", lambda: tuple(rules))

    shuffled = Scanner(registry).scan([str(SAMPLES / "violations")])
    baseline = Scanner(default_registry()).scan([str(SAMPLES / "violations")])

    assert render(shuffled.violations) == render(baseline.violations)


def test_scanner_logs_unreadable_paths(tmp_path, caplog):
    with caplog.at_level("WARNING", logger=scanner_module.__name__):
        Scanner(default_registry()).scan([str(tmp_path / "gone.swift")])

    assert "gone.swift" in caplog.text


def _void_returns(tmp_path, source):
    path = tmp_path / "Decl.swift"
    path.write_text(source, encoding="utf-8")
    result = Scanner(default_registry(), enabled=["avoid-void-return"]).scan([str(path)])
    return [violation.line for violation in result.violations]


def test_return_type_wrapped_onto_next_line(tmp_path):
    assert _void_returns(tmp_path, "func reload()\n    -> Void {\n}\n") == [2]
    assert _void_returns(tmp_path, "func reload() async\n    throws -> Void {\n}\n") == [2]


def test_declaration_with_attribute_arguments(tmp_path):
    source = (
        "@objc(reloadWithSender:) func reload(sender: Any) -> Void {\n"
        "}\n"
        "@available(iOS 13, *) func other() -> Void {\n"
        "}\n"
    )

    assert _void_returns(tmp_path, source) == [1, 3]
