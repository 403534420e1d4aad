"""DomainResolver: turn a label sequence into a ParseOutcome.

Per-lookup flow:
    1. Reject a missing trie (RULE_STRUCTURE_UNAVAILABLE)
    2. Reject empty input or empty labels (INVALID_INPUT)
    3. Reverse labels and ask the match engine for the prevailing rule
    4. If the rule's suffix consumes every label, the host is itself a
       public suffix; BareSuffixPolicy decides what that means
    5. Otherwise split the host into subdomain / domain / suffix

The resolver holds no mutable state. One instance can serve any
number of concurrent lookups.
"""
from __future__ import annotations

from enum import Enum, auto
from typing import Sequence

from publicsuffix_lite.matching.engine import find_winning_rule
from publicsuffix_lite.matching.trie import SuffixTrie
from publicsuffix_lite.resolver.outcome import DomainInfo, ErrorKind, ParseOutcome
from publicsuffix_lite.rules.rule import FALLBACK_RULE, Rule, RuleType


class BareSuffixPolicy(Enum):
    """What to do when the host is exactly a public suffix.

    SUFFIX_ONLY: succeed with a DomainInfo that has no registrable
        part, as long as the prevailing rule confirms the boundary.
    REJECT: always fail with UNKNOWN_DOMAIN. The failure carries the
        matched rule so callers can still see which suffix it was.
    """
    SUFFIX_ONLY = auto()
    REJECT = auto()


class DomainResolver:
    """Resolve normalized host labels against a compiled suffix trie.

    Args:
        trie: the compiled rule structure; None means no rules were
            ever loaded and every lookup fails
        bare_suffix_policy: handling of hosts that are a public suffix
    """

    def __init__(
        self,
        trie: SuffixTrie | None,
        bare_suffix_policy: BareSuffixPolicy = BareSuffixPolicy.SUFFIX_ONLY,
    ) -> None:
        self._trie = trie
        self._policy = bare_suffix_policy

    @property
    def trie(self) -> SuffixTrie | None:
        return self._trie

    @property
    def bare_suffix_policy(self) -> BareSuffixPolicy:
        return self._policy

    def resolve(self, labels: Sequence[str], hostname: str | None = None) -> ParseOutcome:
        """Resolve *labels* (host order, leftmost first).

        *hostname* is the normalized host the labels came from; it is
        rebuilt from the labels when omitted.
        """
        if self._trie is None:
            return ParseOutcome.failure(
                ErrorKind.RULE_STRUCTURE_UNAVAILABLE,
                "No rule structure has been built",
            )
        if not labels or any(label == "" for label in labels):
            return ParseOutcome.failure(
                ErrorKind.INVALID_INPUT, "Invalid domain part detected"
            )

        host_labels = list(labels)
        if hostname is None:
            hostname = ".".join(host_labels)
        rule = find_winning_rule(host_labels[::-1], self._trie)

        suffix_len = rule.suffix_label_count
        if len(host_labels) == suffix_len:
            return self._bare_suffix(host_labels, hostname, rule)

        suffix = ".".join(host_labels[-suffix_len:])
        domain = host_labels[-suffix_len - 1]
        sub_labels = host_labels[:-suffix_len - 1]
        return ParseOutcome.success(DomainInfo(
            hostname=hostname,
            public_suffix=suffix,
            matched_rule=rule,
            registrable_domain=f"{domain}.{suffix}",
            domain=domain,
            subdomain=".".join(sub_labels) or None,
        ))

    def _bare_suffix(
        self, host_labels: list[str], hostname: str, rule: Rule
    ) -> ParseOutcome:
        joined = ".".join(host_labels)
        if self._policy is BareSuffixPolicy.REJECT:
            return ParseOutcome.failure(
                ErrorKind.UNKNOWN_DOMAIN,
                f"Domain {hostname} is a public suffix",
                matched_rule=rule,
            )

        if rule is FALLBACK_RULE:
            confirmed = True
        elif rule.type is RuleType.WILDCARD:
            confirmed = joined.endswith(".".join(rule.labels[1:]))
        else:
            confirmed = joined == ".".join(rule.labels)

        if not confirmed:
            return ParseOutcome.failure(
                ErrorKind.UNKNOWN_DOMAIN, f"Unknown domain {hostname}"
            )
        return ParseOutcome.success(DomainInfo(
            hostname=hostname,
            public_suffix=joined,
            matched_rule=rule,
        ))
