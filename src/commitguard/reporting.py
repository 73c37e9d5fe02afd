# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rejection messages shown to commit authors."""

from __future__ import annotations

from typing import Final

from .commit_msg import CommitCheckResult, FailedCheck
from .constants import REGEX_PREFIX, RELEASE_MARKER
from .diff import DiffCheckResult
from .patterns import is_regex_entry
from .scanner import ScanResult

RULE: Final[str] = "-" * 79
BYPASS_HINT: Final[str] = "To commit anyway, use --no-verify (which you should never do!)"


def banner(hook: str, body: list[str]) -> str:
    """Frame ``body`` lines with the aborted-operation banner for ``hook``."""

    title = f" {hook.upper()} HOOK ABORTED OPERATION "
    header = title.center(len(RULE), "-")
    return "\n".join([header, *body, BYPASS_HINT, RULE])


def display_entry(entry: str) -> str:
    """Return ``entry`` as shown to users (regex entries without their marker)."""

    return entry[len(REGEX_PREFIX) :] if is_regex_entry(entry) else entry


def dirty_word_lines(scan: ScanResult) -> list[str]:
    """Return the literal/regex listing for ``scan``."""

    lines: list[str] = []
    words = scan.literal_words()
    if words:
        lines.append("Dirty words found:")
        lines.extend(f"\t{word}" for word in words)
    patterns = scan.regex_patterns()
    if patterns:
        lines.append("Dirty regex patterns found:")
        lines.extend(f"\t{pattern}" for pattern in patterns)
    return lines


def ticket_lines(prefix: str, release_marker: str = RELEASE_MARKER) -> list[str]:
    return [
        "Commit message must start with a ticket number followed by a space then message",
        f'For Example "{prefix}-1234 " or if you\'re special it can be "{release_marker}"',
    ]


def format_commit_rejection(
    result: CommitCheckResult,
    *,
    hook: str = "commit-msg",
    release_marker: str = RELEASE_MARKER,
) -> str:
    """Return the message explaining why ``result`` was rejected."""

    if result.failed is FailedCheck.TICKET:
        return banner(hook, ticket_lines(result.prefix, release_marker))
    return banner(hook, [*dirty_word_lines(result.scan), "in the commit message."])


def format_diff_rejection(result: DiffCheckResult, *, hook: str = "pre-commit") -> str:
    """Return the message listing dirty words and the files containing them."""

    body = dirty_word_lines(result.scan)
    body.append("In files:")
    for path in sorted(result.scan.files):
        found = ", ".join(sorted((display_entry(entry) for entry in result.scan.files[path]), key=str.lower))
        body.append(f"\t{path}: {found}")
    return banner(hook, body)


__all__ = [
    "banner",
    "dirty_word_lines",
    "display_entry",
    "format_commit_rejection",
    "format_diff_rejection",
]
