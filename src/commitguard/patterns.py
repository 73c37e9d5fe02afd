# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Compile dirty word entries into boundary-aware, case-insensitive patterns."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .constants import BOUNDARY_TEMPLATE, REGEX_PREFIX
from .errors import ConfigurationError


def is_regex_entry(entry: str) -> bool:
    """Return whether ``entry`` carries the ``REGEX:`` marker."""

    return entry.startswith(REGEX_PREFIX)


def entry_body(entry: str) -> str:
    """Return the matchable core of ``entry``.

    Regex entries lose their marker; literal entries are escaped so every
    character matches itself.
    """

    if is_regex_entry(entry):
        return entry[len(REGEX_PREFIX) :]
    return re.escape(entry)


def compile_entry(entry: str) -> re.Pattern[str]:
    """Compile ``entry`` into a pattern bounded by word breaks or underscores.

    Args:
        entry: Literal word/phrase or ``REGEX:``-prefixed expression.

    Returns:
        re.Pattern[str]: Case-insensitive pattern. ``str`` patterns are
        Unicode-aware so non-ASCII letters fold as well.

    Raises:
        ConfigurationError: If a regex entry does not compile.
    """

    try:
        return re.compile(BOUNDARY_TEMPLATE.format(body=entry_body(entry)), re.IGNORECASE)
    except re.error as exc:
        raise ConfigurationError(f"Invalid dirty word pattern '{entry}': {exc}") from exc


def compile_rules(entries: Iterable[str]) -> dict[str, re.Pattern[str]]:
    """Return a mapping of each entry to its compiled pattern."""

    return {entry: compile_entry(entry) for entry in entries}


__all__ = ["compile_entry", "compile_rules", "entry_body", "is_regex_entry"]
