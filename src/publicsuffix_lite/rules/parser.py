"""Parse raw Public Suffix List text into Rule objects.

Format, one rule per line:
    // comment             -- ignored
    <blank line>           -- ignored
    co.uk                  -- normal rule
    *.ck                   -- wildcard rule
    !www.ck                -- exception rule

Only the first whitespace-delimited token of a line is the rule;
anything after it is ignored. The list marks its two sections with
"// ===BEGIN ICANN DOMAINS===" and "// ===BEGIN PRIVATE DOMAINS==="
comments, which set the division of the rules that follow.

Malformed lines are skipped, never raised.
"""
from __future__ import annotations

import logging

from publicsuffix_lite.rules.rule import Rule, RuleDivision

log = logging.getLogger(__name__)

COMMENT_MARKER = "//"

_SECTION_MARKERS = {
    "===BEGIN ICANN DOMAINS===": RuleDivision.ICANN,
    "===END ICANN DOMAINS===": RuleDivision.UNKNOWN,
    "===BEGIN PRIVATE DOMAINS===": RuleDivision.PRIVATE,
    "===END PRIVATE DOMAINS===": RuleDivision.UNKNOWN,
}


def parse_rules(text: str, include_private: bool = True) -> list[Rule]:
    """Parse rule-list text into a de-duplicated list of rules.

    Order of first occurrence is kept so that building a trie from the
    result is deterministic.

    Args:
        text: raw rule-list contents
        include_private: keep rules from the PRIVATE section (default True)
    """
    division = RuleDivision.UNKNOWN
    rules: dict[Rule, None] = {}
    skipped = 0

    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith(COMMENT_MARKER):
            marker = stripped[len(COMMENT_MARKER):].strip()
            division = _SECTION_MARKERS.get(marker, division)
            continue

        token = stripped.split()[0]
        try:
            rule = Rule.parse(token, division=division)
        except ValueError as exc:
            log.debug("Skipping line %d: %s", lineno, exc)
            skipped += 1
            continue

        if not include_private and rule.division is RuleDivision.PRIVATE:
            continue
        rules.setdefault(rule)

    if skipped:
        log.debug("Skipped %d malformed rule lines", skipped)
    return list(rules)
