"""Rule providers: where raw rule text comes from.

The matching core only consumes parsed rules. Providers sit outside
it and turn some source into a rule list. Only a local-file provider
ships here; anything that fetches over the network or caches belongs
to the caller.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from publicsuffix_lite.rules.parser import parse_rules
from publicsuffix_lite.rules.rule import Rule

log = logging.getLogger(__name__)


class RuleProvider(Protocol):
    def load(self) -> list[Rule]:
        """Return the parsed rule list."""
        ...


class FileRuleProvider:
    """Read a Public Suffix List file from disk.

    Args:
        path: location of the rule file (e.g. public_suffix_list.dat)
        include_private: keep rules from the PRIVATE section
        encoding: file encoding (default utf-8)
    """

    def __init__(
        self,
        path: str | Path,
        include_private: bool = True,
        encoding: str = "utf-8",
    ) -> None:
        self._path = Path(path)
        self._include_private = include_private
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Rule]:
        if not self._path.is_file():
            raise FileNotFoundError(f"Rule file does not exist: {self._path}")
        text = self._path.read_text(encoding=self._encoding)
        rules = parse_rules(text, include_private=self._include_private)
        log.info("Loaded %d rules from %s", len(rules), self._path)
        return rules
