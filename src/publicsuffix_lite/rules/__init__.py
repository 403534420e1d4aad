"""Public Suffix List rules: entity, text parser, and providers."""

from publicsuffix_lite.rules.parser import parse_rules
from publicsuffix_lite.rules.provider import FileRuleProvider, RuleProvider
from publicsuffix_lite.rules.rule import (
    FALLBACK_RULE,
    Rule,
    RuleDivision,
    RuleType,
)

__all__ = [
    "FALLBACK_RULE",
    "FileRuleProvider",
    "Rule",
    "RuleDivision",
    "RuleProvider",
    "RuleType",
    "parse_rules",
]
