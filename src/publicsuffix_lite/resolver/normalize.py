"""Host name normalization ahead of rule matching.

The resolver expects ASCII, lower-case labels. IdnaNormalizer gets
there by trimming, lower-casing, and converting any non-ASCII label
to its punycode form ("bücher" -> "xn--bcher-kva"). The ideographic
and full-width full stops count as dots when splitting. Pure-ASCII labels
pass through untouched, and empty labels are kept so the resolver
can report them as INVALID_INPUT instead of silently dropping them.
"""
from __future__ import annotations

from typing import Protocol

import idna

# Full stops that IDNA treats as label separators.
_UNICODE_DOTS = ("\u3002", "\uff0e", "\uff61")


class NormalizationError(ValueError):
    """The host cannot be converted to ASCII labels."""


class DomainNormalizer(Protocol):
    def normalize(self, host: str) -> list[str]:
        """Return the host's labels, leftmost first."""
        ...


class IdnaNormalizer:
    """Default normalizer: lower-case plus UTS #46 / IDNA 2008 mapping."""

    def normalize(self, host: str) -> list[str]:
        host = host.strip().lower()
        for dot in _UNICODE_DOTS:
            host = host.replace(dot, ".")
        labels = host.split(".")
        return [self._label_to_ascii(label) for label in labels]

    @staticmethod
    def _label_to_ascii(label: str) -> str:
        if label.isascii():
            return label
        try:
            encoded = idna.encode(label, uts46=True).decode("ascii")
        except idna.IDNAError as exc:
            raise NormalizationError(f"Cannot encode label {label!r}: {exc}") from exc
        if "." in encoded:
            raise NormalizationError(f"Label {label!r} maps to more than one label")
        return encoded
