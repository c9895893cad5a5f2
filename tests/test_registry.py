import pytest

from stylecheck.errors import DuplicateRuleId, UnknownRuleId
from stylecheck.rules import (
    FILE_UNREADABLE,
    SCAN_ERROR,
    Rule,
    RuleRegistry,
    UnitKind,
    default_registry,
)


def _rule(rule_id):
    return Rule(id=rule_id, description=rule_id, check=lambda unit: [])


def test_register_preserves_insertion_order():
    registry = RuleRegistry()
    for rule_id in ("zeta", "alpha", "mid"):
        registry.register(_rule(rule_id))

    assert registry.ids() == ("zeta", "alpha", "mid")
    assert [rule.id for rule in registry.all()] == ["zeta", "alpha", "mid"]


def test_register_rejects_duplicate_id():
    registry = RuleRegistry([_rule("alpha")])

    with pytest.raises(DuplicateRuleId):
        registry.register(_rule("alpha"))
    assert len(registry) == 1


def test_get_unknown_rule_raises():
    registry = RuleRegistry([_rule("alpha")])

    assert registry.get("alpha").id == "alpha"
    with pytest.raises(UnknownRuleId):
        registry.get("beta")


def test_rules_are_immutable():
    rule = _rule("alpha")

    with pytest.raises(AttributeError):
        rule.id = "beta"


def test_default_registry_contents():
    registry = default_registry()

    assert registry.ids()[:2] == (FILE_UNREADABLE, SCAN_ERROR)
    for rule_id in (
        "avoid-void-return",
        "unowned-self",
        "mark-separator",
        "trailing-semicolon",
        "trailing-whitespace",
        "force-cast",
        "empty-parens-closure",
    ):
        assert rule_id in registry
    assert registry.get("avoid-void-return").applies_to is UnitKind.DECLARATION
    assert registry.get("mark-separator").applies_to is UnitKind.FILE
