"""Label-level trie over reversed public suffix rules.

Rules are split on "." and reversed before insertion so that the TLD
comes first: "co.uk" becomes ["uk", "co"]. Rules that share a TLD
share its node and branch only where they diverge.

Wildcard labels ("*") are stored as ordinary children under the key
"*". The trie itself does no pattern matching; the match engine looks
up both the literal label child and the "*" child at every level.

The root represents the implicit "*" rule and owns FALLBACK_RULE, so
every lookup finds at least one candidate.

Lifecycle: build once, then freeze. A frozen trie is never mutated,
which is what lets any number of threads read it without locking.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from publicsuffix_lite.rules.rule import FALLBACK_RULE, Rule

log = logging.getLogger(__name__)


@dataclass
class TrieNode:
    """A node in the suffix trie.

    children maps a label string (or "*") to the next node.
    rule is the rule whose reversed label path ends here, if any.
    """
    children: dict[str, TrieNode] = field(default_factory=dict)
    rule: Rule | None = None


class SuffixTrie:
    """Trie over reversed rule labels.

    Usage:
        trie = SuffixTrie.build(parse_rules(text))
        node = trie.root.children["uk"].children["co"]
        node.rule   # Rule("co.uk")
    """

    def __init__(self) -> None:
        self._root = TrieNode(rule=FALLBACK_RULE)
        self._rule_count = 0
        self._frozen = False

    @classmethod
    def build(cls, rules: Iterable[Rule]) -> SuffixTrie:
        """Insert every rule, then freeze the trie."""
        trie = cls()
        for rule in rules:
            trie.insert(rule)
        trie.freeze()
        log.debug(
            "Built suffix trie: %d rules, %d nodes",
            trie.rule_count, trie.node_count(),
        )
        return trie

    @property
    def root(self) -> TrieNode:
        return self._root

    @property
    def rule_count(self) -> int:
        return self._rule_count

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def insert(self, rule: Rule) -> None:
        """Insert a rule along its reversed label path.

        If another rule already owns the terminal node, the first one
        keeps it.
        """
        if self._frozen:
            raise RuntimeError("Cannot insert into a frozen SuffixTrie")

        node = self._root
        for label in reversed(rule.labels):
            child = node.children.get(label)
            if child is None:
                child = TrieNode()
                node.children[label] = child
            node = child

        if node.rule is not None:
            log.debug("Rule %s shadowed by %s", rule.name, node.rule.name)
            return
        node.rule = rule
        self._rule_count += 1

    def node_count(self) -> int:
        """Count total nodes in the trie (for memory reporting)."""
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count
