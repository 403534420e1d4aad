"""Shared fixtures: a trimmed Public Suffix List and parsers built from it."""

from __future__ import annotations

from pathlib import Path

import pytest

from publicsuffix_lite.matching.trie import SuffixTrie
from publicsuffix_lite.resolver.domain_parser import DomainParser
from publicsuffix_lite.resolver.resolver import BareSuffixPolicy
from publicsuffix_lite.rules.parser import parse_rules

DATA_DIR = Path(__file__).parent / "data"
PSL_PATH = DATA_DIR / "public_suffix_list.dat"


@pytest.fixture(scope="session")
def psl_path() -> Path:
    return PSL_PATH


@pytest.fixture(scope="session")
def psl_text() -> str:
    return PSL_PATH.read_text(encoding="utf-8")


@pytest.fixture(scope="session")
def psl_trie(psl_text: str) -> SuffixTrie:
    return SuffixTrie.build(parse_rules(psl_text))


@pytest.fixture(scope="session")
def psl_parser(psl_text: str) -> DomainParser:
    return DomainParser.from_text(psl_text)


@pytest.fixture(scope="session")
def strict_parser(psl_text: str) -> DomainParser:
    return DomainParser.from_text(
        psl_text, bare_suffix_policy=BareSuffixPolicy.REJECT
    )
