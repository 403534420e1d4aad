"""Tests for the SuffixTrie."""

import pytest

from publicsuffix_lite.matching.trie import SuffixTrie
from publicsuffix_lite.rules.rule import FALLBACK_RULE, Rule


def _build(*names: str) -> SuffixTrie:
    return SuffixTrie.build(Rule.parse(n) for n in names)


class TestTrieBasics:
    """Basic trie construction."""

    def test_empty_trie_owns_fallback(self):
        t = SuffixTrie.build([])
        assert t.root.rule is FALLBACK_RULE
        assert t.root.children == {}
        assert t.rule_count == 0
        assert t.node_count() == 1

    def test_rule_inserted_reversed(self):
        t = _build("co.uk")
        uk = t.root.children["uk"]
        assert uk.rule is None  # intermediate node, no rule of its own
        assert uk.children["co"].rule.name == "co.uk"

    def test_wildcard_is_literal_key(self):
        t = _build("*.ck")
        assert t.root.children["ck"].children["*"].rule.name == "*.ck"

    def test_exception_path_drops_marker(self):
        t = _build("!www.ck")
        assert t.root.children["ck"].children["www"].rule.name == "!www.ck"

    def test_node_count(self):
        t = _build("k12.ak.us")
        # root -> us -> ak -> k12 = 4 nodes
        assert t.node_count() == 4

    def test_shared_suffix(self):
        """Rules sharing a TLD share its node."""
        t = _build("uk", "co.uk", "ac.uk")
        # root -> uk -> co, ac = 4 nodes
        assert t.node_count() == 4
        assert t.rule_count == 3
        assert t.root.children["uk"].rule.name == "uk"


class TestTrieLifecycle:
    """Freeze and duplicate handling."""

    def test_build_freezes(self):
        t = _build("com")
        assert t.frozen is True
        with pytest.raises(RuntimeError, match="frozen"):
            t.insert(Rule.parse("net"))

    def test_manual_insert_before_freeze(self):
        t = SuffixTrie()
        t.insert(Rule.parse("com"))
        assert t.frozen is False
        t.freeze()
        assert t.rule_count == 1

    def test_first_rule_keeps_node(self):
        t = SuffixTrie()
        first = Rule.parse("com")
        t.insert(first)
        t.insert(Rule.parse("COM"))
        assert t.root.children["com"].rule is first
        assert t.rule_count == 1

    def test_many_rules(self):
        t = SuffixTrie.build(Rule.parse(f"r{i}.example") for i in range(1000))
        assert t.rule_count == 1000
        assert t.node_count() == 1002
