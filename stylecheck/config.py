"""Load the rule configuration and resolve which rules are enabled."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .errors import ConfigError, UnknownRuleId
from .rules import RuleRegistry
from .scanner import DEFAULT_EXTENSIONS
from .utils import read_yaml_file

DEFAULT_CONFIG = ".stylecheck.yaml"


@dataclass
class CheckerConfig:
    """Rule toggles and the file extensions picked up from directories."""

    rules: Dict[str, bool] = field(default_factory=dict)
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS


def _parse_rules(raw: Any, path: Path) -> Dict[str, bool]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: 'rules' must be a mapping of rule id to true/false")
    rules: Dict[str, bool] = {}
    for rule_id, enabled in raw.items():
        if not isinstance(enabled, bool):
            raise ConfigError(f"{path}: rule '{rule_id}' must be true or false, got {enabled!r}")
        rules[str(rule_id)] = enabled
    return rules


def _parse_extensions(raw: Any, path: Path) -> Tuple[str, ...]:
    if raw is None:
        return DEFAULT_EXTENSIONS
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list) or not raw:
        raise ConfigError(f"{path}: 'extensions' must be a non-empty list")
    return tuple(ext if str(ext).startswith(".") else f".{ext}" for ext in map(str, raw))


def load_config(path: Optional[Path]) -> CheckerConfig:
    """Read ``path`` into a config; a missing file yields the defaults."""

    if path is None:
        return CheckerConfig()
    data = read_yaml_file(path)
    if data is None:
        return CheckerConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: configuration must be a mapping")
    unknown_keys = set(data) - {"rules", "extensions"}
    if unknown_keys:
        raise ConfigError(f"{path}: unknown configuration keys: {', '.join(sorted(map(str, unknown_keys)))}")
    return CheckerConfig(
        rules=_parse_rules(data.get("rules"), path),
        extensions=_parse_extensions(data.get("extensions"), path),
    )


def resolve_enabled(
    registry: RuleRegistry,
    toggles: Mapping[str, bool],
    disable_all: bool = False,
    enable: Iterable[str] = (),
    disable: Iterable[str] = (),
) -> List[str]:
    """Return enabled rule ids in registry order.

    Every rule starts enabled unless ``disable_all`` is set; file toggles are
    applied next, then the explicit ``enable``/``disable`` overrides. Any id
    not present in ``registry`` raises ``UnknownRuleId``.
    """

    state = {rule_id: not disable_all for rule_id in registry.ids()}
    overrides: List[Tuple[str, bool]] = list(toggles.items())
    overrides.extend((rule_id, True) for rule_id in enable)
    overrides.extend((rule_id, False) for rule_id in disable)
    for rule_id, enabled in overrides:
        if rule_id not in registry:
            raise UnknownRuleId(rule_id)
        state[rule_id] = enabled
    return [rule_id for rule_id in registry.ids() if state[rule_id]]
