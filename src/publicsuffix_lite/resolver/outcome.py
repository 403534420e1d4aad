"""Lookup results: DomainInfo on success, a typed error otherwise.

Failures are values. A ParseOutcome holds exactly one of `info` or
`error`; callers branch on `error.kind`. DomainParser.parse() turns a
failed outcome into a single DomainParseError that carries the same
kind, so exception-style callers still branch on kind, not on type.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from publicsuffix_lite.rules.rule import Rule


class ErrorKind(Enum):
    INVALID_INPUT = auto()
    UNKNOWN_DOMAIN = auto()
    RULE_STRUCTURE_UNAVAILABLE = auto()


@dataclass(frozen=True, slots=True)
class DomainInfo:
    """Breakdown of a host name under the prevailing rule.

    For "shop.example.co.uk" matched by "co.uk":
        hostname           = "shop.example.co.uk"
        public_suffix      = "co.uk"
        domain             = "example"
        registrable_domain = "example.co.uk"
        subdomain          = "shop"

    When the host is itself a public suffix, domain and
    registrable_domain are None and public_suffix equals hostname.
    """
    hostname: str
    public_suffix: str
    matched_rule: Rule
    registrable_domain: str | None = None
    domain: str | None = None
    subdomain: str | None = None

    @property
    def is_public_suffix(self) -> bool:
        return self.registrable_domain is None


@dataclass(frozen=True, slots=True)
class ParseFailure:
    kind: ErrorKind
    message: str
    matched_rule: Rule | None = None


class DomainParseError(Exception):
    """Raised by DomainParser.parse(); inspect .kind for the reason."""

    def __init__(self, failure: ParseFailure) -> None:
        super().__init__(failure.message)
        self.failure = failure

    @property
    def kind(self) -> ErrorKind:
        return self.failure.kind

    @property
    def matched_rule(self) -> Rule | None:
        return self.failure.matched_rule


@dataclass(frozen=True, slots=True)
class ParseOutcome:
    """Result of one lookup."""
    info: DomainInfo | None = None
    error: ParseFailure | None = None

    def __post_init__(self) -> None:
        if (self.info is None) == (self.error is None):
            raise ValueError("ParseOutcome needs exactly one of info or error")

    @classmethod
    def success(cls, info: DomainInfo) -> ParseOutcome:
        return cls(info=info)

    @classmethod
    def failure(
        cls, kind: ErrorKind, message: str, matched_rule: Rule | None = None
    ) -> ParseOutcome:
        return cls(error=ParseFailure(kind, message, matched_rule))

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> DomainInfo:
        """Return the DomainInfo or raise DomainParseError."""
        if self.error is not None:
            raise DomainParseError(self.error)
        return self.info  # type: ignore[return-value]
