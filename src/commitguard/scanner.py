# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dirty word scanning over arbitrary text."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .constants import REGEX_PREFIX
from .patterns import is_regex_entry

Rules = Mapping[str, re.Pattern[str]]


def scan_text(text: str | None, rules: Rules) -> set[str]:
    """Return the entries of ``rules`` whose pattern occurs anywhere in ``text``.

    Args:
        text: Text to inspect; empty or ``None`` is always clean.
        rules: Mapping of entry strings to compiled patterns.

    Returns:
        set[str]: Entry strings with at least one match.
    """

    if not text or not rules:
        return set()
    return {entry for entry, pattern in rules.items() if pattern.search(text)}


@dataclass
class ScanResult:
    """Dirty words found overall and, for diffs, per file."""

    words: set[str] = field(default_factory=set)
    files: dict[str, set[str]] = field(default_factory=dict)

    @property
    def dirty(self) -> bool:
        """Return ``True`` when any entry was found."""

        return bool(self.words)

    def register(self, found: Iterable[str], path: str | None = None) -> None:
        """Record ``found`` entries, attributing them to ``path`` when given."""

        entries = set(found)
        if not entries:
            return
        self.words |= entries
        if path is not None:
            self.files.setdefault(path, set()).update(entries)

    def literal_words(self) -> list[str]:
        """Return the literal entries found, sorted case-insensitively."""

        return sorted((word for word in self.words if not is_regex_entry(word)), key=str.lower)

    def regex_patterns(self) -> list[str]:
        """Return the regex bodies found (without the ``REGEX:`` marker), sorted."""

        return sorted(word[len(REGEX_PREFIX) :] for word in self.words if is_regex_entry(word))


class DirtyWordScanner:
    """Scan text against a fixed set of compiled dirty word rules."""

    def __init__(self, rules: Rules) -> None:
        self._rules = dict(rules)

    @property
    def rules(self) -> Rules:
        """Return the rules bound to this scanner."""

        return self._rules

    def has_rules(self) -> bool:
        """Return whether any dirty words are defined."""

        return bool(self._rules)

    def scan(self, text: str | None) -> set[str]:
        """Return the entries found in ``text``."""

        return scan_text(text, self._rules)


__all__ = ["DirtyWordScanner", "Rules", "ScanResult", "scan_text"]
