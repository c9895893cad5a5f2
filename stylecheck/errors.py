"""Exception types raised by the style checker."""

from __future__ import annotations

from pathlib import Path


class StyleCheckError(Exception):
    """Base class for all checker errors."""


class FileUnreadable(StyleCheckError):
    """A scan path does not exist or cannot be opened."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ScanError(StyleCheckError):
    """A file was read but its content cannot be scanned as text."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class UnknownRuleId(StyleCheckError):
    """Configuration referenced a rule id missing from the registry."""

    def __init__(self, rule_id: str) -> None:
        super().__init__(f"Unknown rule id: {rule_id}")
        self.rule_id = rule_id


class DuplicateRuleId(StyleCheckError):
    def __init__(self, rule_id: str) -> None:
        super().__init__(f"Rule already registered: {rule_id}")
        self.rule_id = rule_id


class ConfigError(StyleCheckError):
    """The configuration file is malformed."""
