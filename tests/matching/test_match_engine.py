"""Tests for candidate collection and prevailing-rule ranking."""

import random

from publicsuffix_lite.matching.engine import (
    find_matching_rules,
    find_winning_rule,
    rank_rules,
    rule_precedence,
)
from publicsuffix_lite.matching.trie import SuffixTrie
from publicsuffix_lite.rules.rule import FALLBACK_RULE, Rule


def _build(*names: str) -> SuffixTrie:
    return SuffixTrie.build(Rule.parse(n) for n in names)


def _rev(host: str) -> list[str]:
    return host.split(".")[::-1]


class TestCollect:
    """find_matching_rules explores exact and wildcard branches."""

    def test_fallback_always_present(self):
        t = _build()
        assert find_matching_rules(_rev("something.xyz"), t) == [FALLBACK_RULE]

    def test_collects_along_path(self):
        t = _build("uk", "co.uk")
        names = [r.name for r in find_matching_rules(_rev("example.co.uk"), t)]
        assert names == ["*", "uk", "co.uk"]

    def test_both_branches_explored(self):
        t = _build("*.ck", "!www.ck")
        names = sorted(r.name for r in find_matching_rules(_rev("www.ck"), t))
        assert names == ["!www.ck", "*", "*.ck"]

    def test_exact_branch_discovered_first(self):
        t = _build("*.ck", "!www.ck")
        names = [r.name for r in find_matching_rules(_rev("www.ck"), t)]
        assert names == ["*", "!www.ck", "*.ck"]

    def test_stops_when_labels_exhausted(self):
        t = _build("co.uk")
        names = [r.name for r in find_matching_rules(_rev("uk"), t)]
        assert names == ["*"]

    def test_wildcard_in_middle(self):
        t = _build("a.*.example")
        names = [r.name for r in find_matching_rules(_rev("x.a.foo.example"), t)]
        assert names == ["*", "a.*.example"]

    def test_literal_star_label_not_double_counted(self):
        t = _build("*.ck")
        names = [r.name for r in find_matching_rules(["ck", "*"], t)]
        assert names == ["*", "*.ck"]

    def test_many_labels_no_recursion_limit(self):
        t = _build("example")
        labels = ["example"] + ["x"] * 5000
        assert [r.name for r in find_matching_rules(labels, t)] == ["*", "example"]


class TestRank:
    """Prevailing rule ordering."""

    def test_exception_beats_longer_rule(self):
        exc = Rule.parse("!city.kawasaki.jp")
        longer = Rule.parse("a.b.city.kawasaki.jp")
        assert rank_rules([longer, exc])[0] is exc

    def test_longer_rule_wins(self):
        t = _build("uk", "co.uk")
        assert find_winning_rule(_rev("example.co.uk"), t).name == "co.uk"

    def test_name_breaks_ties(self):
        a = Rule.parse("*.example")
        b = Rule.parse("foo.example")
        assert rule_precedence(b) > rule_precedence(a)
        assert rank_rules([a, b]) == [b, a]

    def test_ranking_independent_of_input_order(self):
        rules = [Rule.parse(n) for n in ("jp", "*.kawasaki.jp", "!city.kawasaki.jp")]
        rng = random.Random(42)
        for _ in range(10):
            shuffled = rules[:]
            rng.shuffle(shuffled)
            assert rank_rules(shuffled)[0].name == "!city.kawasaki.jp"


class TestWinningRule:
    """find_winning_rule scenarios."""

    def test_exception_wins_over_wildcard(self):
        t = _build("*.ck", "!www.ck")
        assert find_winning_rule(_rev("www.ck"), t).name == "!www.ck"

    def test_wildcard_wins_for_other_label(self):
        t = _build("*.ck", "!www.ck")
        assert find_winning_rule(_rev("foo.ck"), t).name == "*.ck"

    def test_unlisted_tld_uses_fallback(self):
        t = _build("com")
        assert find_winning_rule(_rev("something.xyz"), t) is FALLBACK_RULE

    def test_exact_rule_for_single_label(self):
        t = _build("com")
        assert find_winning_rule(["com"], t).name == "com"

    def test_exception_derived_from_every_wildcard(self, psl_trie):
        """Wherever a wildcard and its exception both match, the exception wins."""
        cases = {
            "www.ck": "!www.ck",
            "sub.www.ck": "!www.ck",
            "city.kawasaki.jp": "!city.kawasaki.jp",
            "a.city.kawasaki.jp": "!city.kawasaki.jp",
        }
        for host, expected in cases.items():
            assert find_winning_rule(_rev(host), psl_trie).name == expected, host

    def test_specificity_on_sample_list(self, psl_trie):
        cases = {
            "school.k12.ak.us": "k12.ak.us",
            "foo.ak.us": "ak.us",
            "foo.us": "us",
            "example.s3.amazonaws.com": "s3.amazonaws.com",
            "example.com": "com",
        }
        for host, expected in cases.items():
            assert find_winning_rule(_rev(host), psl_trie).name == expected, host

    def test_winner_is_head_of_ranking(self, psl_trie):
        for host in ("www.ck", "foo.ck", "a.b.c.kawasaki.jp", "x.co.uk", "localhost"):
            ranked = rank_rules(find_matching_rules(_rev(host), psl_trie))
            assert find_winning_rule(_rev(host), psl_trie) is ranked[0], host
