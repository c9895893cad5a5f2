"""Command-line entry point for the Swift style checker."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from .config import DEFAULT_CONFIG, load_config, resolve_enabled
from .errors import ConfigError, UnknownRuleId
from .reporter import format_summary_table, render, render_json
from .result import ScanResult
from .rules import RuleRegistry, default_registry
from .scanner import Scanner

CONFIG_FAULT_EXIT = 2
INTERRUPTED_EXIT = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stylecheck",
        description="Check Swift sources against the house style guide",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="Files or directories to scan (directories are walked recursively).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"YAML configuration file (defaults to {DEFAULT_CONFIG} when present).",
    )
    parser.add_argument(
        "--enable",
        action="append",
        default=[],
        metavar="RULE",
        help="Enable a rule id (repeatable).",
    )
    parser.add_argument(
        "--disable",
        action="append",
        default=[],
        metavar="RULE",
        help="Disable a rule id (repeatable).",
    )
    parser.add_argument(
        "--disable-all",
        action="store_true",
        help="Start with every rule disabled; combine with --enable.",
    )
    parser.add_argument(
        "--ext",
        dest="extensions",
        action="append",
        default=[],
        help="File extension picked up from directories (repeatable, default .swift).",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Report format.",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        default=None,
        help="Write the report to this path instead of stdout.",
    )
    parser.add_argument(
        "--jobs",
        "-j",
        type=int,
        default=1,
        help="Number of files scanned in parallel.",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a summary table after the report.",
    )
    parser.add_argument(
        "--list-rules",
        action="store_true",
        help="List registered rules and exit.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def list_rules(registry: RuleRegistry) -> str:
    width = max(len(rule.id) for rule in registry.all())
    return "\n".join(
        f"{rule.id:<{width}}  {rule.applies_to.value:<11}  {rule.description}" for rule in registry.all()
    )


def build_scanner(args: argparse.Namespace, registry: RuleRegistry) -> Scanner:
    if args.config is not None:
        config_path = Path(args.config)
        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")
    else:
        config_path = Path(DEFAULT_CONFIG)
    config = load_config(config_path)
    enabled = resolve_enabled(
        registry,
        config.rules,
        disable_all=args.disable_all,
        enable=args.enable,
        disable=args.disable,
    )
    extensions = tuple(ext if ext.startswith(".") else f".{ext}" for ext in args.extensions) or config.extensions
    return Scanner(registry, enabled=enabled, extensions=extensions, jobs=args.jobs)


def write_output(result: ScanResult, output_path: str | None, report_format: str, summary: bool) -> None:
    if report_format == "json":
        payload = render_json(result)
    else:
        payload = "\n".join(render(result.violations))

    if output_path:
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(payload + "\n" if payload else "", encoding="utf-8")
        print(f"Report written to {output_path}")
    elif payload:
        print(payload)

    if summary:
        print()
        print(format_summary_table(result))


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    registry = default_registry()

    if args.list_rules:
        print(list_rules(registry))
        return 0

    try:
        scanner = build_scanner(args, registry)
    except (ConfigError, UnknownRuleId) as exc:
        sys.stderr.write(f"stylecheck: configuration error: {exc}\n")
        return CONFIG_FAULT_EXIT

    result = scanner.scan(args.paths)
    write_output(result, args.output_path, args.format, args.summary)
    if result.interrupted:
        sys.stderr.write(f"stylecheck: scan interrupted after {result.files_scanned} files, report is partial\n")
        return INTERRUPTED_EXIT
    return result.exit_code()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
