"""Match engine: find the prevailing rule for a reversed label sequence.

Two phases:

1. Collect. Walk the trie from the root with a work-list of
   (node, depth) pairs. Every visited node that owns a rule adds it
   to the candidate list. While labels remain, follow BOTH the child
   keyed by the next label and the child keyed by "*". This is not a
   greedy longest-prefix walk: for "www.ck" under {*.ck, !www.ck}
   both rules are candidates, and so is the root's fallback rule.

2. Rank. Pick the maximum under (is_exception, label_count, name):
   exceptions beat everything, then the longer rule wins, then the
   lexicographically greatest name as a deterministic tie-break.

The root always owns the fallback rule, so the candidate list is
never empty and find_winning_rule never fails.
"""
from __future__ import annotations

from typing import Sequence

from publicsuffix_lite.matching.trie import SuffixTrie, TrieNode
from publicsuffix_lite.rules.rule import WILDCARD_LABEL, Rule


def find_matching_rules(labels: Sequence[str], trie: SuffixTrie) -> list[Rule]:
    """Return every rule whose reversed label path prefixes *labels*.

    *labels* must already be reversed (TLD first). Candidates come
    back in discovery order; exact-label branches are explored before
    wildcard branches at each level.
    """
    matches: list[Rule] = []
    work: list[tuple[TrieNode, int]] = [(trie.root, 0)]
    while work:
        node, depth = work.pop()
        if node.rule is not None:
            matches.append(node.rule)
        if depth == len(labels):
            continue

        # Pushed in reverse so the exact child is popped first.
        wild = node.children.get(WILDCARD_LABEL)
        if wild is not None:
            work.append((wild, depth + 1))
        exact = node.children.get(labels[depth])
        if exact is not None and exact is not wild:
            work.append((exact, depth + 1))
    return matches


def rule_precedence(rule: Rule) -> tuple[bool, int, str]:
    """Sort key: higher sorts first in prevailing-rule order."""
    return (rule.is_exception, rule.label_count, rule.name)


def rank_rules(rules: Sequence[Rule]) -> list[Rule]:
    """Order candidates from prevailing to least specific.

    The sort is stable, so equal-precedence rules keep discovery order
    and the root fallback stays ahead of a literal "*" rule.
    """
    return sorted(rules, key=rule_precedence, reverse=True)


def find_winning_rule(labels: Sequence[str], trie: SuffixTrie) -> Rule:
    """Return the single prevailing rule for reversed *labels*."""
    return rank_rules(find_matching_rules(labels, trie))[0]
