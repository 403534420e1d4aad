"""Rule entity: one line of the Public Suffix List.

Three rule shapes exist in the list:
  - "co.uk"     -- normal rule, the whole name is a public suffix
  - "*.ck"      -- wildcard rule, any single label in front of "ck"
  - "!www.ck"   -- exception rule, carves "www.ck" out of "*.ck"

The stored name keeps the "!" marker for display. Matching works on
`labels`, which drops the marker and converts non-ASCII labels to
punycode so they line up with normalized host names.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

import idna

WILDCARD_LABEL = "*"
EXCEPTION_MARKER = "!"


class RuleType(Enum):
    NORMAL = auto()
    WILDCARD = auto()
    WILDCARD_EXCEPTION = auto()


class RuleDivision(Enum):
    """Section of the list a rule was read from."""
    UNKNOWN = auto()
    ICANN = auto()
    PRIVATE = auto()


@dataclass(frozen=True, slots=True)
class Rule:
    """A parsed PSL rule.

    label_count counts the dot-separated labels of the name with any
    "!" prefix excluded, so "!www.ck" has a label_count of 2.
    """
    name: str
    type: RuleType
    labels: tuple[str, ...]
    division: RuleDivision = RuleDivision.UNKNOWN

    def __post_init__(self) -> None:
        if not self.labels or any(label == "" for label in self.labels):
            raise ValueError(f"Rule {self.name!r} has an empty label")
        if self.type is RuleType.WILDCARD_EXCEPTION and len(self.labels) < 2:
            raise ValueError(f"Exception rule {self.name!r} needs at least two labels")

    @property
    def label_count(self) -> int:
        return len(self.labels)

    @property
    def suffix_label_count(self) -> int:
        """Number of host labels that form the public suffix under this rule.

        An exception rule's leftmost label is not part of the suffix:
        "!www.ck" makes "ck" the suffix and "www.ck" registrable.
        """
        if self.type is RuleType.WILDCARD_EXCEPTION:
            return self.label_count - 1
        return self.label_count

    @property
    def is_exception(self) -> bool:
        return self.type is RuleType.WILDCARD_EXCEPTION

    @classmethod
    def parse(cls, text: str, division: RuleDivision = RuleDivision.UNKNOWN) -> Rule:
        """Classify a single rule string.

        Raises ValueError for an empty rule, an empty label, a label
        that cannot be converted to its ASCII form, or an exception rule
        with a single label.
        """
        name = text.strip()
        if not name:
            raise ValueError("Empty rule")

        if name.startswith(EXCEPTION_MARKER):
            rule_type = RuleType.WILDCARD_EXCEPTION
            body = name[len(EXCEPTION_MARKER):]
        elif name.startswith(WILDCARD_LABEL + "."):
            rule_type = RuleType.WILDCARD
            body = name
        else:
            rule_type = RuleType.NORMAL
            body = name

        labels = tuple(_to_ascii(label) for label in body.split("."))
        return cls(name=name, type=rule_type, labels=labels, division=division)

    def __str__(self) -> str:
        return self.name


def _to_ascii(label: str) -> str:
    if label == "" or label == WILDCARD_LABEL:
        return label
    if label.isascii():
        return label.lower()
    try:
        return idna.encode(label, uts46=True).decode("ascii")
    except idna.IDNAError as exc:
        raise ValueError(f"Invalid rule label {label!r}: {exc}") from exc


# The implicit "*" rule: when nothing in the list matches, the
# rightmost label alone is the public suffix.
FALLBACK_RULE = Rule(
    name=WILDCARD_LABEL,
    type=RuleType.WILDCARD,
    labels=(WILDCARD_LABEL,),
)
