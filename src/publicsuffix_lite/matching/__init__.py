"""Compiled rule structure and the prevailing-rule match engine."""

from publicsuffix_lite.matching.engine import (
    find_matching_rules,
    find_winning_rule,
    rank_rules,
    rule_precedence,
)
from publicsuffix_lite.matching.trie import SuffixTrie, TrieNode

__all__ = [
    "SuffixTrie",
    "TrieNode",
    "find_matching_rules",
    "find_winning_rule",
    "rank_rules",
    "rule_precedence",
]
