"""Host name resolution against a compiled rule set.

Re-exports the public API:
    from publicsuffix_lite.resolver import DomainParser, DomainParseError, ErrorKind
"""
from publicsuffix_lite.resolver.domain_parser import DomainParser
from publicsuffix_lite.resolver.normalize import (
    DomainNormalizer,
    IdnaNormalizer,
    NormalizationError,
)
from publicsuffix_lite.resolver.outcome import (
    DomainInfo,
    DomainParseError,
    ErrorKind,
    ParseFailure,
    ParseOutcome,
)
from publicsuffix_lite.resolver.resolver import BareSuffixPolicy, DomainResolver

__all__ = [
    "BareSuffixPolicy",
    "DomainInfo",
    "DomainNormalizer",
    "DomainParseError",
    "DomainParser",
    "DomainResolver",
    "ErrorKind",
    "IdnaNormalizer",
    "NormalizationError",
    "ParseFailure",
    "ParseOutcome",
]
