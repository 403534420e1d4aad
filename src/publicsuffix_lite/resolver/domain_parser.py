"""DomainParser: public entry point for host name lookups.

Usage:
    parser = DomainParser.from_file("public_suffix_list.dat")
    info = parser.parse("shop.example.co.uk")
    info.registrable_domain   # "example.co.uk"
    parser.is_valid_domain("co.uk")   # False

Rule refresh:
    parser.load_rules(new_rules)

load_rules builds a brand-new trie and resolver off to the side,
then swaps the reference. Lookups read the reference once, so an
in-flight lookup finishes against the old trie, which is never
mutated. Reloads are serialized by a writer lock held across the
build and the swap, so concurrent reloads apply in lock order;
readers never take the lock.
"""
from __future__ import annotations

import logging
import re
import threading
from pathlib import Path
from typing import Iterable
from urllib.parse import urlsplit

from publicsuffix_lite.matching.trie import SuffixTrie
from publicsuffix_lite.resolver.normalize import (
    DomainNormalizer,
    IdnaNormalizer,
    NormalizationError,
)
from publicsuffix_lite.resolver.outcome import DomainInfo, ErrorKind, ParseOutcome
from publicsuffix_lite.resolver.resolver import BareSuffixPolicy, DomainResolver
from publicsuffix_lite.rules.parser import parse_rules
from publicsuffix_lite.rules.provider import FileRuleProvider, RuleProvider
from publicsuffix_lite.rules.rule import FALLBACK_RULE, WILDCARD_LABEL, Rule

log = logging.getLogger(__name__)

_HOST_LABEL = re.compile(r"^[a-z0-9_-]+$")
MAX_LABEL_LENGTH = 63
MAX_HOST_LENGTH = 253


class DomainParser:
    """Parse host names against a Public Suffix List rule set.

    Args:
        rules: parsed rules; None leaves the parser without a rule
            structure until load_rules() is called
        normalizer: host normalizer (default IdnaNormalizer)
        bare_suffix_policy: handling of hosts that are a public suffix
    """

    def __init__(
        self,
        rules: Iterable[Rule] | None = None,
        normalizer: DomainNormalizer | None = None,
        bare_suffix_policy: BareSuffixPolicy = BareSuffixPolicy.SUFFIX_ONLY,
    ) -> None:
        self._normalizer = normalizer or IdnaNormalizer()
        self._policy = bare_suffix_policy
        self._write_lock = threading.Lock()
        self._resolver = DomainResolver(None, bare_suffix_policy)
        if rules is not None:
            self.load_rules(rules)

    @classmethod
    def from_text(cls, text: str, include_private: bool = True, **kwargs) -> DomainParser:
        return cls(parse_rules(text, include_private=include_private), **kwargs)

    @classmethod
    def from_provider(cls, provider: RuleProvider, **kwargs) -> DomainParser:
        return cls(provider.load(), **kwargs)

    @classmethod
    def from_file(
        cls, path: str | Path, include_private: bool = True, **kwargs
    ) -> DomainParser:
        return cls.from_provider(
            FileRuleProvider(path, include_private=include_private), **kwargs
        )

    @property
    def resolver(self) -> DomainResolver:
        return self._resolver

    @property
    def rule_count(self) -> int:
        trie = self._resolver.trie
        return trie.rule_count if trie is not None else 0

    def load_rules(self, rules: Iterable[Rule]) -> None:
        """Build a new rule structure and swap it in.

        Concurrent callers are serialized; each build completes before
        the next one starts.
        """
        with self._write_lock:
            trie = SuffixTrie.build(rules)
            self._resolver = DomainResolver(trie, self._policy)
        log.info("Loaded suffix trie with %d rules", trie.rule_count)

    def resolve(self, host: str) -> ParseOutcome:
        """Normalize and resolve *host* without raising."""
        resolver = self._resolver
        if resolver.trie is None:
            return ParseOutcome.failure(
                ErrorKind.RULE_STRUCTURE_UNAVAILABLE,
                "No rule structure has been built",
            )
        try:
            labels = self._normalizer.normalize(host)
        except NormalizationError as exc:
            return ParseOutcome.failure(ErrorKind.INVALID_INPUT, str(exc))
        return resolver.resolve(labels, ".".join(labels))

    def parse(self, host: str) -> DomainInfo:
        """Return the DomainInfo for *host*.

        Raises DomainParseError (inspect .kind) for invalid input, a
        host rejected as a bare public suffix, or a parser with no
        rules loaded.
        """
        return self.resolve(host).unwrap()

    def is_valid_domain(self, host: str) -> bool:
        """True when *host* is a registrable host under a listed suffix.

        False for empty input, wildcard-looking input ("*..."),
        anything shaped like an absolute URI, labels with characters
        outside letters, digits, "-" and "_", hosts that are
        themselves a public suffix, and hosts whose TLD is not in the
        list at all (matched only by the implicit "*" rule).
        """
        if not host or host.startswith(WILDCARD_LABEL):
            return False
        if _looks_like_absolute_uri(host):
            return False

        resolver = self._resolver
        if resolver.trie is None:
            return False
        try:
            labels = self._normalizer.normalize(host)
        except NormalizationError:
            return False
        if not _is_dns_safe(labels):
            return False

        outcome = resolver.resolve(labels, ".".join(labels))
        if not outcome.ok:
            return False
        info = outcome.info
        return not info.is_public_suffix and info.matched_rule is not FALLBACK_RULE


def _looks_like_absolute_uri(host: str) -> bool:
    if "/" in host:
        return True
    try:
        parts = urlsplit(host)
    except ValueError:
        return True
    return bool(parts.scheme) and bool(parts.netloc or parts.path)


def _is_dns_safe(labels: list[str]) -> bool:
    if len(".".join(labels)) > MAX_HOST_LENGTH:
        return False
    return all(
        len(label) <= MAX_LABEL_LENGTH and _HOST_LABEL.match(label)
        for label in labels
    )
